"""Meal domain entity: description, primary protein/carb and other components."""
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4


class Meal:
    def __init__(self, description: str = "", primary_protein: str = "", primary_carb: str = "",
                 other_components: Optional[List[str]] = None, id: Optional[UUID] = None,
                 created_at: Optional[datetime] = None):
        # Description is accepted as given; callers trim and reject empty input (see MealInput)
        self.id = id or uuid4()
        self.description = description
        self.primary_protein = primary_protein
        self.primary_carb = primary_carb
        self.other_components = list(other_components) if other_components else []
        self.created_at = created_at or datetime.now()

    def __str__(self) -> str:
        parts = [self.description]
        if self.primary_protein:
            parts.append(f"Protein: {self.primary_protein}")
        if self.primary_carb:
            parts.append(f"Carb: {self.primary_carb}")
        if self.other_components:
            parts.append("Components: " + ", ".join(self.other_components))
        return " - ".join(parts)

    def __repr__(self) -> str:
        return f"Meal(id={self.id}, {self})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def replace(self, description: str, primary_protein: str, primary_carb: str,
                other_components: Optional[List[str]] = None) -> "Meal":
        '''Return an edited copy keeping the original id and creation time.'''
        return Meal(description, primary_protein, primary_carb, other_components,
                    id=self.id, created_at=self.created_at)

    @staticmethod
    def from_dict(data):
        '''Creates a Meal from its persisted dictionary. Raises on missing or malformed fields.'''
        components = data["other_components"]
        if not isinstance(components, list) or not all(isinstance(c, str) for c in components):
            raise ValueError("other_components must be a list of strings")
        for field in ("description", "primary_protein", "primary_carb"):
            if not isinstance(data[field], str):
                raise ValueError(f"{field} must be a string")
        return Meal(
            description=data["description"],
            primary_protein=data["primary_protein"],
            primary_carb=data["primary_carb"],
            other_components=components,
            id=UUID(data["id"]),
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def to_dict(self):
        return {
            "id": str(self.id),
            "description": self.description,
            "primary_protein": self.primary_protein,
            "primary_carb": self.primary_carb,
            "other_components": list(self.other_components),
            "created_at": self.created_at.isoformat(),
        }

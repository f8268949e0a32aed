"""MealAssignment domain entity: binds one meal to one calendar day."""
from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from mealplanner.domain.dates import DayLike, normalize_to_day
from mealplanner.utilities.constants import DATE_FORMAT


class MealAssignment:
    def __init__(self, meal_id: UUID, date: DayLike, id: Optional[UUID] = None,
                 created_at: Optional[datetime] = None):
        self.id = id or uuid4()
        # No check that meal_id resolves; readers skip dangling references
        self.meal_id = meal_id
        self.date = normalize_to_day(date)
        self.created_at = created_at or datetime.now()

    def __str__(self) -> str:
        return f"{self.date.strftime(DATE_FORMAT)} - meal {self.meal_id}"

    def __repr__(self) -> str:
        return f"MealAssignment(id={self.id}, {self})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, MealAssignment):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    @staticmethod
    def from_dict(data):
        return MealAssignment(
            meal_id=UUID(data["meal_id"]),
            date=date.fromisoformat(data["date"]),
            id=UUID(data["id"]),
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def to_dict(self):
        return {
            "id": str(self.id),
            "meal_id": str(self.meal_id),
            "date": self.date.isoformat(),
            "created_at": self.created_at.isoformat(),
        }

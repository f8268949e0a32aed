"""Meal repository: whole-collection persistence of Meal records under one key.

Every mutation reads the full collection, changes it and writes it back. There
is no locking; concurrent writers can overwrite each other (last write wins),
so the embedding application must serialize access to one repository instance.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from mealplanner.domain.Meal import Meal
from mealplanner.infra.Storage import StorageManager
from mealplanner.utilities.constants import MEALS_KEY

logger = logging.getLogger(__name__)


class MealRepositoryProtocol(ABC):
    @abstractmethod
    def save(self, meal: Meal) -> None:
        """Insert the meal, or replace the stored record with the same id."""

    @abstractmethod
    def fetch_all(self) -> List[Meal]:
        ...

    @abstractmethod
    def delete(self, meal_id: UUID) -> None:
        ...

    def update(self, meal: Meal) -> None:
        '''Same as save (upsert); kept as its own name for readability at call sites.'''
        self.save(meal)

    def get(self, meal_id: UUID) -> Optional[Meal]:
        return next((m for m in self.fetch_all() if m.id == meal_id), None)


class MealRepository(MealRepositoryProtocol):
    def __init__(self, storage: Optional[StorageManager] = None, key: str = MEALS_KEY):
        self.storage = storage or StorageManager()
        self.key = key

    def save(self, meal: Meal) -> None:
        meals = self.fetch_all()
        for index, existing in enumerate(meals):
            if existing.id == meal.id:
                meals[index] = meal
                logger.debug(f"Updating meal {meal.id}")
                break
        else:
            meals.append(meal)
            logger.debug(f"Adding meal {meal.id}")
        self.storage.save(meals, self.key)

    def fetch_all(self) -> List[Meal]:
        return self.storage.fetch(self.key, Meal.from_dict)

    def delete(self, meal_id: UUID) -> None:
        meals = self.fetch_all()
        remaining = [m for m in meals if m.id != meal_id]
        if len(remaining) != len(meals):
            logger.debug(f"Deleting meal {meal_id}")
        self.storage.save(remaining, self.key)


class InMemoryMealRepository(MealRepositoryProtocol):
    """Dict-backed double with the same upsert/delete semantics, no encoding."""

    def __init__(self, meals: Optional[List[Meal]] = None):
        self._meals: Dict[UUID, Meal] = {}
        for meal in meals or []:
            self.save(meal)

    def save(self, meal: Meal) -> None:
        self._meals[meal.id] = meal

    def fetch_all(self) -> List[Meal]:
        return list(self._meals.values())

    def delete(self, meal_id: UUID) -> None:
        self._meals.pop(meal_id, None)

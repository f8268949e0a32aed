"""Assignment repository: append-only persistence of MealAssignment records.

Same read-modify-write discipline as the meal repository (no locking).
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from mealplanner.domain.MealAssignment import MealAssignment
from mealplanner.domain.dates import DayLike, normalize_to_day
from mealplanner.infra.Storage import StorageManager
from mealplanner.utilities.constants import ASSIGNMENTS_KEY

logger = logging.getLogger(__name__)


class AssignmentRepositoryProtocol(ABC):
    @abstractmethod
    def save(self, assignment: MealAssignment) -> None:
        """Append the assignment. There is no update-by-id path."""

    @abstractmethod
    def fetch_all(self) -> List[MealAssignment]:
        ...

    @abstractmethod
    def delete(self, assignment_id: UUID) -> None:
        ...

    def fetch_for(self, day: DayLike) -> List[MealAssignment]:
        """All assignments on the calendar day of ``day`` (empty list if none)."""
        target = normalize_to_day(day)
        return [a for a in self.fetch_all() if a.date == target]


class AssignmentRepository(AssignmentRepositoryProtocol):
    def __init__(self, storage: Optional[StorageManager] = None, key: str = ASSIGNMENTS_KEY):
        self.storage = storage or StorageManager()
        self.key = key

    def save(self, assignment: MealAssignment) -> None:
        assignments = self.fetch_all()
        assignments.append(assignment)
        logger.debug(f"Assigning meal {assignment.meal_id} to {assignment.date.isoformat()}")
        self.storage.save(assignments, self.key)

    def fetch_all(self) -> List[MealAssignment]:
        return self.storage.fetch(self.key, MealAssignment.from_dict)

    def delete(self, assignment_id: UUID) -> None:
        assignments = self.fetch_all()
        remaining = [a for a in assignments if a.id != assignment_id]
        if len(remaining) != len(assignments):
            logger.debug(f"Deleting assignment {assignment_id}")
        self.storage.save(remaining, self.key)


class InMemoryAssignmentRepository(AssignmentRepositoryProtocol):
    def __init__(self, assignments: Optional[List[MealAssignment]] = None):
        self._assignments: List[MealAssignment] = list(assignments or [])

    def save(self, assignment: MealAssignment) -> None:
        self._assignments.append(assignment)

    def fetch_all(self) -> List[MealAssignment]:
        return list(self._assignments)

    def delete(self, assignment_id: UUID) -> None:
        self._assignments = [a for a in self._assignments if a.id != assignment_id]

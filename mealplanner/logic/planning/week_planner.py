"""Weekly planning: 7-day windows, week navigation and meal-to-day assignments."""
from __future__ import annotations
import logging
from datetime import date
from typing import Dict, Iterable, List, Mapping
from uuid import UUID

from mealplanner.domain.Meal import Meal
from mealplanner.domain.MealAssignment import MealAssignment
from mealplanner.domain.dates import DayLike, add_days, normalize_to_day
from mealplanner.infra.Assignment_Repository import AssignmentRepositoryProtocol
from mealplanner.utilities.constants import DAYS_IN_WEEK

logger = logging.getLogger(__name__)


def generate_week_days(anchor: DayLike) -> List[date]:
    """The anchor's calendar day followed by the next six days."""
    start = normalize_to_day(anchor)
    return [add_days(start, offset) for offset in range(DAYS_IN_WEEK)]


def shift_week(anchor: DayLike, weeks: int) -> date:
    """Move the anchor by whole weeks (negative goes back)."""
    return add_days(anchor, DAYS_IN_WEEK * weeks)


def meals_for_day(assignments: Iterable[MealAssignment], meals_by_id: Mapping[UUID, Meal]) -> List[Meal]:
    """Resolve assignments to meals in order, skipping meals that no longer exist."""
    resolved = []
    for assignment in assignments:
        meal = meals_by_id.get(assignment.meal_id)
        if meal is None:
            logger.debug(f"Skipping assignment {assignment.id}: meal {assignment.meal_id} not found")
            continue
        resolved.append(meal)
    return resolved


class PlannerService:
    def __init__(self, assignment_repository: AssignmentRepositoryProtocol):
        self.assignment_repository = assignment_repository

    def generate_week_days(self, anchor: DayLike) -> List[date]:
        return generate_week_days(anchor)

    def next_week(self, anchor: DayLike) -> List[date]:
        return generate_week_days(shift_week(anchor, 1))

    def previous_week(self, anchor: DayLike) -> List[date]:
        return generate_week_days(shift_week(anchor, -1))

    def assign_meal(self, meal_id: UUID, day: DayLike) -> MealAssignment:
        '''Persist a new assignment. Does not check that meal_id exists.'''
        assignment = MealAssignment(meal_id=meal_id, date=day)
        self.assignment_repository.save(assignment)
        logger.info(f"Assigned meal {meal_id} to {assignment.date.isoformat()}")
        return assignment

    def fetch_assignments(self, days: Iterable[DayLike]) -> Dict[date, List[MealAssignment]]:
        """Group assignments by normalized day; every requested day is a key."""
        all_assignments = self.assignment_repository.fetch_all()
        grouped: Dict[date, List[MealAssignment]] = {}
        for day in days:
            normalized = normalize_to_day(day)
            grouped[normalized] = [a for a in all_assignments if a.date == normalized]
        return grouped

    def remove_assignment(self, assignment_id: UUID) -> None:
        self.assignment_repository.delete(assignment_id)
        logger.info(f"Removed assignment {assignment_id}")

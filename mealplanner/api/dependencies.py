"""
API dependencies for dependency injection.

Routes never build repositories themselves; tests swap these out through
``app.dependency_overrides``.
"""
from fastapi import Depends

from mealplanner.infra.Assignment_Repository import AssignmentRepository, AssignmentRepositoryProtocol
from mealplanner.infra.Meal_Repository import MealRepository, MealRepositoryProtocol
from mealplanner.infra.Storage import JsonFileBackend, StorageManager
from mealplanner.infra.paths import DATA_DIR
from mealplanner.logic.planning.week_planner import PlannerService


def get_storage() -> StorageManager:
    return StorageManager(JsonFileBackend(DATA_DIR))


def get_meal_repository(storage: StorageManager = Depends(get_storage)) -> MealRepositoryProtocol:
    return MealRepository(storage)


def get_assignment_repository(storage: StorageManager = Depends(get_storage)) -> AssignmentRepositoryProtocol:
    return AssignmentRepository(storage)


def get_planner_service(
    repo: AssignmentRepositoryProtocol = Depends(get_assignment_repository),
) -> PlannerService:
    return PlannerService(repo)

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from mealplanner.api.dependencies import get_meal_repository
from mealplanner.domain.FilterCriteria import FilterCriteria
from mealplanner.infra.Meal_Repository import MealRepositoryProtocol
from mealplanner.logic.filtering.meal_filter import (
    distinct_carbs,
    distinct_components,
    distinct_proteins,
    filter_meals,
)
from mealplanner.utilities.validators import MealInput

router = APIRouter(prefix="/api/meals", tags=["Meals"])
logger = logging.getLogger(__name__)


@router.get("")
def list_meals(
    protein: Optional[str] = Query(default=None),
    carb: Optional[str] = Query(default=None),
    component: List[str] = Query(default=[]),
    repo: MealRepositoryProtocol = Depends(get_meal_repository),
):
    """All meals, narrowed by protein, carb and required components (AND)."""
    criteria = FilterCriteria(protein, carb, component)
    meals = filter_meals(repo.fetch_all(), criteria)
    return {"meals": [m.to_dict() for m in meals], "count": len(meals), "filtered": criteria.is_active}


@router.get("/options")
def filter_options(repo: MealRepositoryProtocol = Depends(get_meal_repository)):
    meals = repo.fetch_all()
    return {
        "proteins": distinct_proteins(meals),
        "carbs": distinct_carbs(meals),
        "components": distinct_components(meals),
    }


@router.post("", status_code=201)
def create_meal(payload: MealInput, repo: MealRepositoryProtocol = Depends(get_meal_repository)):
    meal = payload.to_meal()
    repo.save(meal)
    logger.info(f"Created meal {meal.id} ({meal.description})")
    return meal.to_dict()


@router.put("/{meal_id}")
def edit_meal(meal_id: UUID, payload: MealInput, repo: MealRepositoryProtocol = Depends(get_meal_repository)):
    existing = repo.get(meal_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Meal not found")
    meal = payload.to_meal(existing)
    repo.update(meal)
    return meal.to_dict()


@router.delete("/{meal_id}", status_code=204)
def remove_meal(meal_id: UUID, repo: MealRepositoryProtocol = Depends(get_meal_repository)):
    repo.delete(meal_id)
    return Response(status_code=204)

import logging
from datetime import date as _date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from mealplanner.api.dependencies import get_meal_repository, get_planner_service
from mealplanner.domain.dates import day_name
from mealplanner.infra.Meal_Repository import MealRepositoryProtocol
from mealplanner.logic.planning.week_planner import PlannerService, meals_for_day, shift_week
from mealplanner.utilities.validators import AssignmentInput

router = APIRouter(prefix="/api", tags=["Planner"])
logger = logging.getLogger(__name__)


@router.get("/week")
def week_view(
    start: Optional[_date] = Query(default=None),
    planner: PlannerService = Depends(get_planner_service),
    meal_repo: MealRepositoryProtocol = Depends(get_meal_repository),
):
    """Seven days from ``start`` (default today) with their assignments and meals."""
    anchor = start or _date.today()
    days = planner.generate_week_days(anchor)
    grouped = planner.fetch_assignments(days)
    meals_by_id = {m.id: m for m in meal_repo.fetch_all()}
    return {
        "start": days[0].isoformat(),
        "end": days[-1].isoformat(),
        "previous_start": shift_week(anchor, -1).isoformat(),
        "next_start": shift_week(anchor, 1).isoformat(),
        "days": [
            {
                "date": d.isoformat(),
                "day_name": day_name(d),
                "assignments": [a.to_dict() for a in grouped[d]],
                "meals": [m.to_dict() for m in meals_for_day(grouped[d], meals_by_id)],
            }
            for d in days
        ],
    }


@router.post("/assignments", status_code=201)
def create_assignment(payload: AssignmentInput, planner: PlannerService = Depends(get_planner_service)):
    assignment = planner.assign_meal(payload.meal_id, payload.date)
    return assignment.to_dict()


@router.delete("/assignments/{assignment_id}", status_code=204)
def delete_assignment(assignment_id: UUID, planner: PlannerService = Depends(get_planner_service)):
    planner.remove_assignment(assignment_id)
    return Response(status_code=204)

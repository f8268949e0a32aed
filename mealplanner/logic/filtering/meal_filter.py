"""Meal catalog filtering and filter-option extraction.

Matching is case-insensitive: both the stored tag and the requested value are
folded the same way before comparison. The distinct-value helpers are
deliberately case-sensitive, so "Chicken" and "chicken" show up as two
options even though either one selects both meals.
"""
from __future__ import annotations
from typing import Iterable, List, Sequence

from mealplanner.domain.FilterCriteria import FilterCriteria
from mealplanner.domain.Meal import Meal


def _fold(value: str) -> str:
    return value.casefold()


def _matches(meal: Meal, criteria: FilterCriteria) -> bool:
    if criteria.protein_filter is not None and _fold(meal.primary_protein) != _fold(criteria.protein_filter):
        return False
    if criteria.carb_filter is not None and _fold(meal.primary_carb) != _fold(criteria.carb_filter):
        return False
    if criteria.component_filters:
        wanted = {_fold(c) for c in criteria.component_filters}
        present = {_fold(c) for c in meal.other_components}
        if not wanted <= present:
            return False
    return True


def filter_meals(meals: Sequence[Meal], criteria: FilterCriteria) -> List[Meal]:
    """Return the meals satisfying every active predicate (AND).

    Inactive criteria return the input unchanged.
    """
    if not criteria.is_active:
        return list(meals)
    return [m for m in meals if _matches(m, criteria)]


def _distinct(values: Iterable[str]) -> List[str]:
    return sorted(set(values))


def distinct_proteins(meals: Iterable[Meal]) -> List[str]:
    return _distinct(m.primary_protein for m in meals)


def distinct_carbs(meals: Iterable[Meal]) -> List[str]:
    return _distinct(m.primary_carb for m in meals)


def distinct_components(meals: Iterable[Meal]) -> List[str]:
    return _distinct(c for m in meals for c in m.other_components)

"""FilterCriteria value object: optional protein/carb predicates plus required components."""
from typing import Iterable, Optional


class FilterCriteria:
    def __init__(self, protein_filter: Optional[str] = None, carb_filter: Optional[str] = None,
                 component_filters: Optional[Iterable[str]] = None):
        self.protein_filter = protein_filter
        self.carb_filter = carb_filter
        if isinstance(component_filters, str):
            # A bare tag is one component, not a set of characters
            component_filters = [component_filters]
        self.component_filters = set(component_filters) if component_filters else set()

    @property
    def is_active(self) -> bool:
        return self.protein_filter is not None or self.carb_filter is not None or bool(self.component_filters)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FilterCriteria):
            return NotImplemented
        return (self.protein_filter, self.carb_filter, self.component_filters) == \
            (other.protein_filter, other.carb_filter, other.component_filters)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"FilterCriteria(protein={self.protein_filter!r}, carb={self.carb_filter!r}, "
                f"components={sorted(self.component_filters)!r})")

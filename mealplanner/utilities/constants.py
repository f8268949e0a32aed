from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
DAYS_IN_WEEK: Final[int] = 7
MEALS_KEY: Final[str] = "meals"
ASSIGNMENTS_KEY: Final[str] = "mealAssignments"

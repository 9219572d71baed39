"""Weekly and single-day meal planning over a shared virtual pantry."""

import logging
from dataclasses import dataclass, field
from datetime import date

from pantry_planner.domain.nutrition import MacroTargets
from pantry_planner.domain.pantry import PantryItem
from pantry_planner.domain.plan import DAYS_OF_WEEK, DayPlan, Meal, WeeklyPlan
from pantry_planner.services.allocator import DayAllocator
from pantry_planner.services.nutrition import round_half_up
from pantry_planner.services.virtual_pantry import VirtualPantry

WEEKLY_GAP_WARNING_KCAL = 500
DAILY_GAP_WARNING_KCAL = 300
SINGLE_DAY_GAP_WARNING_KCAL = 200

_logger = logging.getLogger(__name__)


def day_index(today: date) -> int:
    """Return the position of ``today`` in the week, Monday being 0."""
    return today.weekday()


def day_label(today: date) -> str:
    """Return the weekday label used as plan key for ``today``."""
    return DAYS_OF_WEEK[day_index(today)]


def is_workout_day(index: int, workout_frequency: int) -> bool:
    """Return True for the first ``workout_frequency`` days of the week."""
    return index < workout_frequency


@dataclass
class WeekPlanner:
    """Plans meals from the pantry for a week or a single day."""

    allocator: DayAllocator = field(default_factory=DayAllocator)
    weekly_gap_warning_kcal: float = WEEKLY_GAP_WARNING_KCAL
    daily_gap_warning_kcal: float = DAILY_GAP_WARNING_KCAL
    single_day_gap_warning_kcal: float = SINGLE_DAY_GAP_WARNING_KCAL

    def plan_week(
        self,
        pantry_items: list[PantryItem],
        daily_targets: MacroTargets,
        workout_frequency: int = 0,
    ) -> WeeklyPlan:
        """Generate seven days of meals from one snapshot of the pantry.

        Stock is not replenished between days: what Monday uses is gone for
        the rest of the week.
        """
        pantry = VirtualPantry.clone(pantry_items)
        days: dict[str, list[Meal]] = {}
        totals: dict[str, MacroTargets] = {}
        gaps: dict[str, float] = {}

        for index, day in enumerate(DAYS_OF_WEEK):
            result = self.allocator.allocate(
                pantry,
                daily_targets,
                is_workout_day(index, workout_frequency),
            )
            days[day] = result.meals
            totals[day] = result.total_nutrition
            gaps[day] = result.calorie_gap

        warnings = self._week_warnings(gaps)
        _logger.info(
            "Weekly plan generated: items=%s workout_days=%s total_gap=%s warnings=%s",
            len(pantry_items),
            min(workout_frequency, len(DAYS_OF_WEEK)),
            round_half_up(sum(gaps.values())),
            len(warnings),
        )
        return WeeklyPlan(
            days=days,
            total_nutrition=totals,
            calorie_gaps=gaps,
            warnings=warnings,
        )

    def plan_day(
        self,
        pantry_items: list[PantryItem],
        daily_targets: MacroTargets,
        is_workout_day: bool = False,
    ) -> DayPlan:
        """Generate a single day of meals from a fresh pantry snapshot."""
        pantry = VirtualPantry.clone(pantry_items)
        result = self.allocator.allocate(pantry, daily_targets, is_workout_day)
        warnings: list[str] = []
        if result.calorie_gap > self.single_day_gap_warning_kcal:
            warnings.append(
                f"Mancano {round_half_up(result.calorie_gap):.0f} kcal - "
                "Aggiungi altri cibi in dispensa"
            )
        return DayPlan(
            meals=result.meals,
            total_nutrition=result.total_nutrition,
            warnings=warnings,
        )

    def plan_today(
        self,
        pantry_items: list[PantryItem],
        daily_targets: MacroTargets,
        workout_frequency: int,
        today: date,
    ) -> DayPlan:
        """Generate a single-day plan for the caller's ``today``."""
        return self.plan_day(
            pantry_items,
            daily_targets,
            is_workout_day(day_index(today), workout_frequency),
        )

    def _week_warnings(self, gaps: dict[str, float]) -> list[str]:
        warnings: list[str] = []
        total_gap = sum(gaps.values())
        if total_gap > self.weekly_gap_warning_kcal:
            warnings.append(
                "Scorte insufficienti per la settimana. "
                f"Mancano circa {round_half_up(total_gap):.0f} kcal totali."
            )
        for day in DAYS_OF_WEEK:
            gap = gaps[day]
            if gap > self.daily_gap_warning_kcal:
                warnings.append(
                    f"{day}: Mancano {round_half_up(gap):.0f} kcal - "
                    "Aggiungi altri cibi in dispensa"
                )
        return warnings

import math
from dataclasses import dataclass
from typing import Literal, Optional

TOTAL_DAYS = 28

Status = Literal["day1", "final", "ahead", "ok"]


@dataclass(frozen=True)
class PeriodResult:
    status: Status
    required_seconds: Optional[float]


@dataclass(frozen=True)
class WeekDayPosition:
    week: int
    day_in_week: int


def days_done(day_index: int) -> int:
    return day_index - 1


def days_left(day_index: int) -> int:
    return TOTAL_DAYS - days_done(day_index)


def compute_period_result(
    goal_seconds: float,
    day_index: int,
    current_avg_seconds: Optional[float] = None,
) -> Optional[PeriodResult]:
    """Average needed over the remaining days so the whole period lands on the goal.

    Solves ``(current * done + required * left) / 28 == goal`` for ``required``.
    Returns None while the current average is still missing after day 1.
    """
    if day_index < 1:
        raise ValueError(f"day_index must be >= 1, got {day_index}")
    done = days_done(day_index)
    left = days_left(day_index)
    if done == 0:
        return PeriodResult("day1", goal_seconds)
    # Only reachable past day 28; callers clamp to 1..28.
    if left <= 0:
        return PeriodResult("final", None)
    if current_avg_seconds is None:
        return None
    raw = (goal_seconds * TOTAL_DAYS - current_avg_seconds * done) / left
    if raw < 0:
        return PeriodResult("ahead", 0)
    return PeriodResult("ok", raw)


def week_day_of(day_index: int) -> WeekDayPosition:
    return WeekDayPosition(week=math.ceil(day_index / 7), day_in_week=(day_index - 1) % 7 + 1)

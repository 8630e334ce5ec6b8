from period_pace.period import PeriodResult, WeekDayPosition, compute_period_result, week_day_of
from period_pace.tiers import Tier, presentation_tier
from period_pace.timecodec import format_time, parse_day, parse_time

__all__ = [
    "PeriodResult",
    "Tier",
    "WeekDayPosition",
    "compute_period_result",
    "format_time",
    "parse_day",
    "parse_time",
    "presentation_tier",
    "week_day_of",
]

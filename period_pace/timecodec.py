import math
import re
from typing import Optional

EMPTY_TIME = "--:--"


def parse_time(text: object) -> Optional[int]:
    """Decode "m:ss" into total seconds, or None when the text is not a valid time."""
    if not isinstance(text, str) or not text:
        return None
    # Keep the sign so negative components are rejected rather than silently flipped.
    cleaned = re.sub(r"[^0-9:\-]", "", text)
    parts = cleaned.split(":")
    if len(parts) != 2:
        return None
    try:
        mins, secs = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if mins < 0 or secs < 0 or secs > 59:
        return None
    return mins * 60 + secs


def format_time(seconds: Optional[float]) -> str:
    if seconds is None or (isinstance(seconds, float) and math.isnan(seconds)):
        return EMPTY_TIME
    # Half-up rounding; round() would send 216.5 to 216.
    clamped = max(0, int(math.floor(float(seconds) + 0.5)))
    m, s = divmod(clamped, 60)
    return f"{m}:{s:02d}"


def parse_day(text: object, total_days: int = 28) -> Optional[int]:
    if not isinstance(text, str):
        return None
    m = re.match(r"\s*([+-]?\d+)", text)
    if m is None:
        return None
    day = int(m.group(1))
    if not (1 <= day <= total_days):
        return None
    return day

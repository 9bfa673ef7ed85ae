import math
from typing import Any

from .config import get_settings


def clamp_max_len(requested: Any) -> int:
    """Effective maximum cycle length for a `maxLen` request value.

    Missing, zero, boolean, NaN or non-numeric input falls back to the
    default; anything else is truncated to an int and clamped into the
    allowed range (infinities land on the nearest bound).
    """
    settings = get_settings()
    default = settings.chains_default_max_len
    low, high = settings.chains_min_len, settings.chains_max_len_cap

    if requested is None or isinstance(requested, bool):
        return default
    if isinstance(requested, int):
        value = requested
    else:
        try:
            number = float(requested)
        except (TypeError, ValueError):
            return default
        if math.isnan(number):
            return default
        if math.isinf(number):
            return high if number > 0 else low
        value = int(number)

    if value == 0:
        return default
    return max(low, min(value, high))

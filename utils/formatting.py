import math


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def format_distance(meters: float) -> str:
    """850 -> '850m', 2430 -> '2.4km'."""
    if meters < 1000:
        return f"{_round_half_up(meters)}m"
    return f"{meters / 1000:.1f}km"


def format_duration(seconds: float) -> str:
    return f"{_round_half_up(seconds / 60)}min"

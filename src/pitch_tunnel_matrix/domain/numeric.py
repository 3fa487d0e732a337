import math


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3, -2.5 -> -2), unlike the built-in round()."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def round_score(value: float) -> int:
    return int(round_half_up(value))

# radialslider/formatting.py
"""Value-to-text formatters for the slider read-out."""
from typing import Callable

Formatter = Callable[[float], str]


def decimal_formatter(places: int, suffix: str = "") -> Formatter:
    """
    Formatter with at most `places` decimals, trailing zeros dropped
    (12.5 -> "12.5", 12.0 -> "12"), followed by `suffix`.
    """
    places = max(0, int(places))

    def fmt(value: float) -> str:
        s = f"{value:.{places}f}"
        if "." in s:
            s = s.rstrip("0").rstrip(".")
        if s == "-0":
            s = "0"
        return s + suffix

    return fmt


format_double = decimal_formatter(3)
format_degree = decimal_formatter(2, "°")
format_radian = decimal_formatter(4, "rad")

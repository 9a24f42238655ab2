"""
Sentinel values for statistics without a finite value.

A statistic whose denominator is zero is reported as an explicit Sentinel
member rather than a raw float('inf') or float('nan'), so renderers and
serializers never have to interpret IEEE special values.
"""

from enum import Enum


class Sentinel(Enum):
    """Tagged non-finite statistic."""
    INFINITE = 'infinite'     # positive numerator over a zero denominator
    UNDEFINED = 'undefined'   # zero over zero

    def __str__(self) -> str:
        return 'Infinity' if self is Sentinel.INFINITE else 'undefined'


Statistic = float | Sentinel


def ratio(numerator: float, denominator: float) -> Statistic:
    """
    Divide two non-negative quantities, mapping a zero denominator to a Sentinel.

    Used for F statistics: mean squares are never negative.
    """
    if denominator == 0.0:
        return Sentinel.INFINITE if numerator > 0.0 else Sentinel.UNDEFINED
    return float(numerator / denominator)


def is_sentinel(value: object) -> bool:
    """True if value is a Sentinel member."""
    return isinstance(value, Sentinel)

"""
Presentation helpers.

Statistics are carried at full precision everywhere in the engine; these
functions are the only place values are rounded, at the boundary where a
result is turned into text.
"""

import numpy as np

from statcompare.core.sentinels import Sentinel, Statistic
from statcompare.core.settings import DEFAULT_SETTINGS


def round_statistic(value: Statistic, decimals: int | None = None) -> Statistic:
    """Round a float for display; Sentinel values pass through."""
    if isinstance(value, Sentinel):
        return value
    if decimals is None:
        decimals = DEFAULT_SETTINGS.display_decimals
    return round(float(value), decimals)


def format_statistic(value: Statistic | None, decimals: int | None = None) -> str:
    """Fixed-decimal text for a statistic ('Infinity' / 'undefined' for sentinels)."""
    if value is None:
        return 'N/A'
    if isinstance(value, Sentinel):
        return str(value)
    if decimals is None:
        decimals = DEFAULT_SETTINGS.display_decimals
    return f"{value:.{decimals}f}"


def format_pvalue(p: float | None, floor: float | None = None) -> str:
    """Format a p-value: '< 0.0001' below the floor, otherwise 4 decimals."""
    if p is None or np.isnan(p):
        return 'N/A'
    if floor is None:
        floor = DEFAULT_SETTINGS.p_value_floor
    if p < floor:
        return f"< {floor:.4f}"
    return f"{p:.4f}"


def is_significant(p: float | None, alpha: float | None = None) -> bool:
    """True if p is below the significance level."""
    if p is None or np.isnan(p):
        return False
    if alpha is None:
        alpha = DEFAULT_SETTINGS.significance_level
    return p < alpha

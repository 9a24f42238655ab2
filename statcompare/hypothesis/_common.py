"""
Common types for hypothesis testing.

Contains the frozen parameter payload that goes inside Result[P] envelopes.
"""

from __future__ import annotations

from dataclasses import dataclass


VALID_SD_KINDS = ("population", "sample")


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for the independent two-sample t-test.

    Attributes
    ----------
    statistic : float
        t = mean_diff / std_error.
    df : int
        n1 + n2 - 2, reported for display and p-value lookup.
    mean_diff : float
        mean1 - mean2.
    std_error : float
        sqrt(sd1^2/n1 + sd2^2/n2).
    means, sds, ns : tuple
        Group statistics the test was computed from, in input order.
    sd_kind : str or None
        'population' or 'sample' when derived from raw samples; None when
        the caller supplied summary statistics directly.
    labels : tuple of str
        Group labels, in input order.
    p_value : float or None
        Two-sided p-value, present only when a distribution provider was
        supplied.
    """
    statistic: float
    df: int
    mean_diff: float
    std_error: float
    means: tuple[float, float]
    sds: tuple[float, float]
    ns: tuple[int, int]
    sd_kind: str | None
    labels: tuple[str, str]
    p_value: float | None = None

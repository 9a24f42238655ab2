"""
Delimited text to Sample.

Two policies exist for pieces that are not numbers:
    'raise' (default): reject the whole token, naming the first bad piece.
        Dropping pieces silently would change the effective sample size
        without the user noticing.
    'drop': remove them and emit a UserWarning with the count, which is
        how spreadsheet columns with stray cells are usually imported.
"""

from __future__ import annotations

import math
import warnings
from typing import Literal

from statcompare.core.exceptions import ValidationError
from statcompare.core.settings import DEFAULT_SETTINGS, EngineSettings
from statcompare.descriptive.design import Sample


_VALID_POLICIES = ('raise', 'drop')


def _parse_piece(piece: str) -> float | None:
    """Parse one trimmed piece; None if it is not a finite number."""
    # float() accepts digit-group underscores ('1_000'); a typed value never has them.
    if not piece or '_' in piece:
        return None
    try:
        value = float(piece)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_sample(
    text: str,
    *,
    on_invalid: Literal['raise', 'drop'] = 'raise',
    settings: EngineSettings | None = None,
) -> Sample:
    """
    Parse delimiter-separated text into a validated Sample.

    Parameters
    ----------
    text : str
        Raw token, e.g. "10, 12, 15, 11, 13".
    on_invalid : str
        'raise' (default) or 'drop'. See module docstring.
    settings : EngineSettings, optional
        Supplies the delimiter and the minimum sample count.

    Returns
    -------
    Sample

    Raises
    ------
    ValidationError
        "empty input" for empty or whitespace-only text; a message naming
        the piece under 'raise'; "too few samples" when fewer than
        min_samples numbers remain.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    if on_invalid not in _VALID_POLICIES:
        raise ValidationError(
            f"on_invalid must be one of {_VALID_POLICIES}, got {on_invalid!r}"
        )
    if not isinstance(text, str):
        raise ValidationError(f"expected text, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise ValidationError("empty input")

    values: list[float] = []
    n_dropped = 0
    for position, raw in enumerate(stripped.split(settings.delimiter), start=1):
        piece = raw.strip()
        value = _parse_piece(piece)
        if value is None:
            if on_invalid == 'raise':
                shown = piece if piece else '<empty>'
                raise ValidationError(
                    f"non-numeric value {shown!r} at position {position}; "
                    f"enter numbers separated by '{settings.delimiter}'"
                )
            n_dropped += 1
            continue
        values.append(value)

    if n_dropped:
        warnings.warn(
            f"dropped {n_dropped} non-numeric value(s) from input",
            UserWarning,
            stacklevel=2,
        )

    if len(values) < settings.min_samples:
        raise ValidationError(
            f"too few samples: at least {settings.min_samples} numeric values "
            f"are required, got {len(values)}"
        )

    return Sample.from_values(values, min_samples=settings.min_samples)

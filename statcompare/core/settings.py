"""
Engine settings.

A single frozen EngineSettings instance holds the constants that govern
parsing and presentation. Functions that depend on a setting accept an
explicit keyword override and fall back to DEFAULT_SETTINGS.

Nothing here is read from the environment or from files: an analysis run
is fully determined by its arguments.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class EngineSettings:
    """Constants for parsing and presentation."""
    min_samples: int
    delimiter: str
    display_decimals: int
    significance_level: float
    p_value_floor: float

    def with_overrides(self, **changes) -> 'EngineSettings':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


# Three observations is the smallest sample the input form accepts.
DEFAULT_SETTINGS = EngineSettings(
    min_samples=3,
    delimiter=',',
    display_decimals=3,
    significance_level=0.05,
    p_value_floor=1e-4,
)

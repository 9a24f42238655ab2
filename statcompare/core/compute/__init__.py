"""
Compute utilities shared by all solvers.
"""

from statcompare.core.compute.timing import Timer

__all__ = ["Timer"]

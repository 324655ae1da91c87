"""
Selection Result
================

Both parameter searches are bounded linear scans. A scan that runs into
its ceiling still returns a number, but that number did not satisfy the
stopping rule. SelectionResult keeps the two cases apart so the caller
can tell a converged answer from a degenerate one.
"""

from dataclasses import dataclass

# Hard ceiling for every parameter search
SEARCH_CEILING: int = 64


@dataclass(frozen=True)
class SelectionResult:
    """
    Outcome of a parameter search.

    Attributes:
        value: The selected parameter (bits or stages).
        converged: False if the search stopped only because it reached
            SEARCH_CEILING.
    """
    value: int
    converged: bool = True

    @property
    def hit_ceiling(self) -> bool:
        """True when the search gave up at the ceiling."""
        return not self.converged

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

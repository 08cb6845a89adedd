"""
worddiff.engine — Character-level diff engine.

An engine is any callable

    engine(original: str, fixed: str) -> list[tuple[Op, str]]

whose EQUAL + DELETE slices, in order, rebuild `original` and whose
EQUAL + INSERT slices rebuild `fixed`.  Nothing else (minimality,
tie-breaking) is relied upon by the rest of the package.

The default engine is myers_diff, a thin wrapper over diff-match-patch
(Myers' O(ND) bisection).  Any other callable honoring the contract
above can be passed as DiffOptions.engine.
"""

from enum import IntEnum
from typing import Callable

from diff_match_patch import diff_match_patch


class Op(IntEnum):
    """Raw edit operations.  Values match diff-match-patch's constants."""
    DELETE = -1
    EQUAL = 0
    INSERT = 1


RawDiff = list[tuple[Op, str]]
DiffEngine = Callable[[str, str], RawDiff]


# ═══════════════════════════════════════════════════════════════════
#  MYERS (diff-match-patch)
# ═══════════════════════════════════════════════════════════════════

def myers_diff(original: str, fixed: str) -> RawDiff:
    """
    Shortest edit script from diff-match-patch.

    Line mode is off and the timeout disabled, so the result is always
    the full character-level minimum and never a time-boxed fallback.
    """
    dmp = diff_match_patch()
    dmp.Diff_Timeout = 0
    return [(Op(op), text) for op, text in dmp.diff_main(original, fixed, False)]

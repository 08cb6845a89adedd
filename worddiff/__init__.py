"""
worddiff — Word-aligned text diffs
==================================

Turn a character-level edit script into replace fragments that start
and end on word boundaries.

    get_diff("hello world", "hello earth")
        → [Replace(0, 6, 'hello ', 'hello '), Replace(6, 11, 'world', 'earth')]

A raw diff would have reported "wo"→"ea" and "ld"→"th" around a shared
"r".  worddiff re-cuts the script at separators (a space by default,
or any set such as WHITESPACE_SEPARATORS) while keeping an exact
mapping back to both texts:

  • "".join(r.original)    == original text
  • "".join(r.replacement) == fixed text
  • consecutive fragments touch: left.end == right.start
"""

from worddiff.core import (
    # Types
    Replace,
    is_identity,
    # Errors
    WorddiffError,
    AdjacencyError,
    ConfigurationError,
    # Algorithm
    convert_diff_to_replace_set,
    merge_replace_pair,
    reduce_replace_set,
    merge_insertions,
)
from worddiff.diff import DiffOptions, get_diff
from worddiff.engine import Op, myers_diff
from worddiff.formats import (
    to_python, from_python, to_json, from_json, apply_replaces, changes,
)
from worddiff.separators import (
    DEFAULT_SEPARATORS, WHITESPACE_SEPARATORS,
    SeparatorMatch, SeparatorMatchers, build_matchers, normalize_separators,
)

__version__ = "0.1.0"
__all__ = [
    "Replace", "is_identity",
    "WorddiffError", "AdjacencyError", "ConfigurationError",
    "convert_diff_to_replace_set", "merge_replace_pair",
    "reduce_replace_set", "merge_insertions",
    "DiffOptions", "get_diff",
    "Op", "myers_diff",
    "to_python", "from_python", "to_json", "from_json",
    "apply_replaces", "changes",
    "DEFAULT_SEPARATORS", "WHITESPACE_SEPARATORS",
    "SeparatorMatch", "SeparatorMatchers", "build_matchers",
    "normalize_separators",
]

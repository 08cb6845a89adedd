"""
worddiff.formats — Convert Replace lists to and from plain data, and apply them.

Supported conversions:
    • list[Replace] ↔ list of dicts {"from", "to", "original", "replacement"}
    • list[Replace] ↔ JSON strings
    • original text + list[Replace] → fixed text
"""

import json
from typing import Any, Iterable, Sequence

from .core import AdjacencyError, Replace, is_identity


# ═══════════════════════════════════════════════════════════════════
#  PYTHON OBJECTS ↔ REPLACE FRAGMENTS
# ═══════════════════════════════════════════════════════════════════

def to_python(replaces: Iterable[Replace]) -> list[dict[str, Any]]:
    """
    Convert fragments to plain dicts.

    The offsets are stored under "from" and "to", the names used by
    editors and by the JSON form.
    """
    return [
        {
            "from": r.start,
            "to": r.end,
            "original": r.original,
            "replacement": r.replacement,
        }
        for r in replaces
    ]


def from_python(data: Iterable[dict[str, Any]]) -> list[Replace]:
    """
    Inverse of to_python.

    Raises KeyError for a missing field and TypeError for a field of
    the wrong type.
    """
    result: list[Replace] = []
    for item in data:
        start, end = item["from"], item["to"]
        original, replacement = item["original"], item["replacement"]
        # bool is a subclass of int; reject it explicitly
        if type(start) is not int or type(end) is not int:
            raise TypeError(f"Offsets must be integers: {item!r}")
        if not isinstance(original, str) or not isinstance(replacement, str):
            raise TypeError(f"Texts must be strings: {item!r}")
        result.append(Replace(start, end, original, replacement))
    return result


# ═══════════════════════════════════════════════════════════════════
#  JSON STRINGS ↔ REPLACE FRAGMENTS
# ═══════════════════════════════════════════════════════════════════

def to_json(replaces: Iterable[Replace], **kwargs) -> str:
    """Serialize fragments to a JSON array."""
    return json.dumps(to_python(replaces), **kwargs)


def from_json(text: str) -> list[Replace]:
    """Parse a JSON array produced by to_json."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
    return from_python(data)


# ═══════════════════════════════════════════════════════════════════
#  APPLY
# ═══════════════════════════════════════════════════════════════════

def apply_replaces(original: str, replaces: Sequence[Replace]) -> str:
    """
    Rebuild the fixed text from `original` and its fragments.

        apply_replaces(a, get_diff(a, b)) == b

    Each fragment must cover exactly the slice original[start:end] and
    start where the previous one ended.  The whole of `original` must be
    covered.
    """
    parts: list[str] = []
    position = 0

    for r in replaces:
        if r.start != position:
            raise AdjacencyError(f"Fragment {r!r} does not start at offset {position}")
        if original[r.start:r.end] != r.original:
            raise ValueError(
                f"Fragment {r!r} does not match original text "
                f"{original[r.start:r.end]!r}"
            )
        parts.append(r.replacement)
        position = r.end

    if position != len(original):
        raise ValueError(
            f"Fragments cover {position} of {len(original)} characters"
        )
    return "".join(parts)


def changes(replaces: Iterable[Replace]) -> list[Replace]:
    """Only the fragments that change something."""
    return [r for r in replaces if not is_identity(r)]

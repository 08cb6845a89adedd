"""
worddiff.core — Word-aligned replace fragments
================================================

§1  THE PROBLEM
───────────────

A character-level diff engine returns the shortest edit script between
two texts.  Shortest is not the same as readable:

    original:  "hello world"
    fixed:     "hello earth"
    raw diff:  = "hello "   - "wo"   + "ea"   = "r"   - "ld"   + "th"

Highlighting "wo"→"ea" and "ld"→"th" separately is useless to a person
accepting a correction.  What they want is

    = "hello "   ~ "world" → "earth"

This module turns the raw script into the second form: a list of
Replace fragments whose boundaries fall on separators (spaces by
default) whenever the text allows it.


§2  REPLACE FRAGMENTS
─────────────────────

A Replace covers [start, end) of the ORIGINAL text and says what that
span becomes in the FIXED text.  A pure insertion is zero-width
(start == end, original == "").  A fragment whose original equals its
replacement is an IDENTITY fragment: unchanged text.

Every list produced here satisfies:

    • Coverage:   "".join(r.original)    == original text
                  "".join(r.replacement) == fixed text
    • Adjacency:  left.end == right.start for consecutive fragments
    • Ordering:   fragments are merged or re-split, never reordered


§3  THE ALGORITHM
─────────────────

    1. convert_diff_to_replace_set   one fragment per raw diff op
    2. reduce_replace_set  (×2)      fold merge_replace_pair over the list
    3. merge_insertions              move a space across an insertion edge

merge_replace_pair is the heart of it.  Two edits in a row are glued
together; an edit next to unchanged text steals only the partial word
that touches it, cutting the unchanged text at its nearest separator.

The reduction runs twice because a split while merging fragments i and
i+1 can leave a new boundary that is mergeable with i+2, which a single
left-to-right pass has already walked past.  Two passes is a deliberate
choice, not a computed fixed point.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from .engine import Op
from .separators import DEFAULT_MATCHERS, SeparatorMatchers


# ═══════════════════════════════════════════════════════════════════
#  ERRORS
# ═══════════════════════════════════════════════════════════════════

class WorddiffError(Exception):
    """Base class for errors raised by worddiff."""


class AdjacencyError(WorddiffError, ValueError):
    """Two fragments that should touch do not (left.end != right.start)."""


class ConfigurationError(WorddiffError, ValueError):
    """The supplied options cannot be used (e.g. no usable separator)."""


# ═══════════════════════════════════════════════════════════════════
#  REPLACE FRAGMENT
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Replace:
    """
    One fragment of a word-aligned diff.

    Examples:
        Replace(0, 6, "hello ", "hello ")    # unchanged text
        Replace(6, 11, "world", "earth")     # substitution
        Replace(3, 3, "", "big ")            # insertion at offset 3
        Replace(3, 7, "big ", "")            # deletion
    """
    start: int
    end: int
    original: str
    replacement: str

    def __repr__(self) -> str:
        return (f"Replace({self.start}, {self.end}, "
                f"{self.original!r}, {self.replacement!r})")


def is_identity(replace: Replace) -> bool:
    """True when the fragment leaves its text unchanged."""
    return replace.original == replace.replacement


def _concat(left: Replace, right: Replace) -> Replace:
    """Glue two adjacent fragments into one."""
    return Replace(
        left.start,
        right.end,
        left.original + right.original,
        left.replacement + right.replacement,
    )


# ═══════════════════════════════════════════════════════════════════
#  RAW DIFF → REPLACE FRAGMENTS
# ═══════════════════════════════════════════════════════════════════

def convert_diff_to_replace_set(raw_ops: Iterable[tuple[int, str]]) -> list[Replace]:
    """
    Turn a raw (op, text) edit script into one Replace per op.

    The position cursor walks the ORIGINAL text only, so insertions are
    zero-width and do not move it.  No merging happens here.
    """
    position = 0
    replaces: list[Replace] = []

    for op, text in raw_ops:
        op = Op(op)
        if op is Op.EQUAL:
            replaces.append(Replace(position, position + len(text), text, text))
            position += len(text)
        elif op is Op.DELETE:
            replaces.append(Replace(position, position + len(text), text, ""))
            position += len(text)
        else:
            replaces.append(Replace(position, position, "", text))

    return replaces


# ═══════════════════════════════════════════════════════════════════
#  PAIR MERGE
# ═══════════════════════════════════════════════════════════════════

def merge_replace_pair(
    left: Replace,
    right: Replace,
    matchers: SeparatorMatchers = DEFAULT_MATCHERS,
) -> list[Replace]:
    """
    Merge two adjacent fragments into one, or re-split them at a separator.

    Returns one or two fragments that together cover exactly what
    `left` and `right` covered:

        both identity          → one fragment
        identity + edit        → the edit takes the last partial word of
                                 the identity text (cut after its last
                                 separator); the rest stays identity
        edit + identity        → mirror image: the edit takes the first
                                 partial word of the identity text
        edit + edit            → one fragment

    An insertion or deletion that itself begins (or ends) at a
    separator is already word-aligned and is left alone.

    Raises AdjacencyError if left.end != right.start.
    """
    if left.end != right.start:
        raise AdjacencyError(
            f"Replace pairs must be adjacent: left={left!r}, right={right!r}"
        )

    left_identity = is_identity(left)
    right_identity = is_identity(right)

    if left_identity and right_identity:
        return [_concat(left, right)]

    if left_identity:
        return _merge_into_right(left, right, matchers)

    if right_identity:
        return _merge_into_left(left, right, matchers)

    return [_concat(left, right)]


def _merge_into_right(
    left: Replace, right: Replace, matchers: SeparatorMatchers
) -> list[Replace]:
    """Identity `left`, edit `right`: hand left's trailing word to right."""
    starts = matchers.starts_with_separator
    if ((right.original == "" and starts(right.replacement))
            or (right.replacement == "" and starts(right.original))):
        return [left, right]

    sep, index = matchers.find_last_separator(left.replacement)
    if index == -1:
        return [_concat(left, right)]

    cut = index + len(sep)
    head = left.original[:cut]
    last_word = left.original[cut:]

    merged: list[Replace] = []
    if head:
        merged.append(Replace(left.start, left.start + len(head), head, head))
    merged.append(Replace(
        left.start + len(head),
        right.end,
        last_word + right.original,
        last_word + right.replacement,
    ))
    return merged


def _merge_into_left(
    left: Replace, right: Replace, matchers: SeparatorMatchers
) -> list[Replace]:
    """Edit `left`, identity `right`: hand right's leading word to left."""
    ends = matchers.ends_with_separator
    if ((left.original == "" and ends(left.replacement))
            or (left.replacement == "" and ends(left.original))):
        return [left, right]

    sep, index = matchers.find_first_separator(right.original)
    if index == -1:
        return [_concat(left, right)]

    first_word = right.original[:index]
    rest = right.original[index:]

    # Never leave a fragment that is nothing but the separator
    if rest == sep:
        return [_concat(left, right)]

    merged = [Replace(
        left.start,
        left.end + len(first_word),
        left.original + first_word,
        left.replacement + first_word,
    )]
    if rest:
        merged.append(Replace(left.end + len(first_word), right.end, rest, rest))
    return merged


# ═══════════════════════════════════════════════════════════════════
#  SEQUENCE FOLDS
# ═══════════════════════════════════════════════════════════════════

def reduce_replace_set(
    replaces: Sequence[Replace],
    matchers: SeparatorMatchers = DEFAULT_MATCHERS,
) -> list[Replace]:
    """
    Fold merge_replace_pair over the list, left to right.

    The last accumulated fragment is merged with each incoming one and
    replaced by the result.  The input list is not modified.
    """
    acc: list[Replace] = []
    for current in replaces:
        if not acc:
            acc.append(current)
            continue
        last = acc.pop()
        acc.extend(merge_replace_pair(last, current, matchers))
    return acc


SPACE = " "


def merge_insertion_pair(left: Replace, right: Replace) -> list[Replace]:
    """
    Move a single space across the edge of a pure insertion.

    Only the plain space character is considered, whatever separators
    were configured for the reduction.
    """
    if (left.original == ""
            and right.original.startswith(SPACE)
            and right.replacement.startswith(SPACE)):
        return [
            Replace(left.start, left.end + 1,
                    left.original + SPACE, left.replacement + SPACE),
            Replace(right.start + 1, right.end,
                    right.original[1:], right.replacement[1:]),
        ]

    if (right.original == ""
            and left.original.endswith(SPACE)
            and left.replacement.endswith(SPACE)):
        return [
            Replace(left.start, left.end - 1,
                    left.original[:-1], left.replacement[:-1]),
            Replace(right.start - 1, right.end,
                    SPACE + right.original, SPACE + right.replacement),
        ]

    return [left, right]


def merge_insertions(replaces: Sequence[Replace]) -> list[Replace]:
    """Fold merge_insertion_pair over the list, left to right."""
    acc: list[Replace] = []
    for current in replaces:
        if not acc:
            acc.append(current)
            continue
        last = acc.pop()
        acc.extend(merge_insertion_pair(last, current))
    return acc

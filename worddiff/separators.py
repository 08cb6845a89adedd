"""
worddiff.separators — Word-boundary detection.

A separator is any non-empty string that may sit between two words.
The merge rules only ever ask three questions about a piece of text:

    • does it START with a separator?
    • does it END with a separator?
    • where is the FIRST separator in it?
    • where is the LAST separator in it?

SeparatorMatchers bundles the answers to those questions for one
separator set.  The set is normalized first (empties dropped, duplicates
removed, longest first) so that a two-character line terminator such as
"\\r\\n" always wins over its one-character prefix "\\r".
"""

from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple


# ═══════════════════════════════════════════════════════════════════
#  SEPARATOR SETS
# ═══════════════════════════════════════════════════════════════════

DEFAULT_SEPARATORS: tuple[str, ...] = (" ",)

WHITESPACE_SEPARATORS: tuple[str, ...] = (
    # white space
    " ",
    "\u00A0",  # no-break space
    "\uFEFF",  # zero-width no-break space
    # tabs
    "\t",
    "\v",
    "\f",
    # others
    "\u0085",  # next line
    "\u180E",  # Mongolian vowel separator
    "\u202F",  # narrow no-break space
    "\u205F",  # medium mathematical space
    "\u3000",  # ideographic space
    # Unicode category Zs
    "\u1680",  # Ogham space mark
    "\u2000",  # en quad
    "\u2001",  # em quad
    "\u2002",  # en space
    "\u2003",  # em space
    "\u2004",  # three-per-em space
    "\u2005",  # four-per-em space
    "\u2006",  # six-per-em space
    "\u2007",  # figure space
    "\u2008",  # punctuation space
    "\u2009",  # thin space
    "\u200A",  # hair space
    # line terminators
    "\n",
    "\r",
    "\r\n",
    "\u2028",  # line separator
    "\u2029",  # paragraph separator
    # format-control characters
    "\u200C",  # zero-width non-joiner
    "\u200D",  # zero-width joiner
)


def normalize_separators(separators: Iterable[str]) -> tuple[str, ...]:
    """
    Drop empty strings and duplicates, then sort longest first.

    The sort is stable, so separators of equal length keep the order
    the caller gave them in.  Returns an empty tuple when nothing
    usable is left; deciding whether that is an error is up to the
    caller.
    """
    if isinstance(separators, str):
        raise TypeError(
            f"separators must be a sequence of strings, not a string: {separators!r}"
        )
    seen: list[str] = []
    for sep in separators:
        if not isinstance(sep, str):
            raise TypeError(f"Separator must be a string, got {type(sep).__name__}")
        if sep and sep not in seen:
            seen.append(sep)
    seen.sort(key=len, reverse=True)
    return tuple(seen)


# ═══════════════════════════════════════════════════════════════════
#  MATCHERS
# ═══════════════════════════════════════════════════════════════════

class SeparatorMatch(NamedTuple):
    """A separator found in a text, and where (-1 = nowhere)."""
    separator: str
    index: int


@dataclass(frozen=True, slots=True)
class SeparatorMatchers:
    """
    Strategy object handed to the pair merger.

    Each field is a plain function of one string.  Build instances with
    build_matchers(); DEFAULT_MATCHERS reproduces single-space behavior.
    """
    separators: tuple[str, ...]
    starts_with_separator: Callable[[str], bool]
    ends_with_separator: Callable[[str], bool]
    find_first_separator: Callable[[str], SeparatorMatch]
    find_last_separator: Callable[[str], SeparatorMatch]


def build_matchers(separators: Iterable[str]) -> SeparatorMatchers:
    """
    Build the matcher functions for a normalized separator set.

    `separators` must already be normalized (see normalize_separators).
    A single separator gets specialized closures; larger sets scan every
    separator.  Both paths give identical answers.
    """
    seps = tuple(separators)
    if not seps:
        raise ValueError("Cannot build matchers for an empty separator set")

    if len(seps) == 1:
        only = seps[0]

        def starts_with_separator(text: str) -> bool:
            return text.startswith(only)

        def ends_with_separator(text: str) -> bool:
            return text.endswith(only)

        def find_first_separator(text: str) -> SeparatorMatch:
            return SeparatorMatch(only, text.find(only))

        def find_last_separator(text: str) -> SeparatorMatch:
            return SeparatorMatch(only, text.rfind(only))

        return SeparatorMatchers(seps, starts_with_separator, ends_with_separator,
                                 find_first_separator, find_last_separator)

    # str.startswith/endswith accept a tuple and test each entry
    def starts_with_any(text: str) -> bool:
        return text.startswith(seps)

    def ends_with_any(text: str) -> bool:
        return text.endswith(seps)

    def find_first_of_any(text: str) -> SeparatorMatch:
        best = SeparatorMatch(seps[0], -1)
        for sep in seps:
            # Strictly smaller: on a tie the earlier (longer) separator stays
            index = text.find(sep)
            if index != -1 and (best.index == -1 or index < best.index):
                best = SeparatorMatch(sep, index)
        return best

    def find_last_of_any(text: str) -> SeparatorMatch:
        best = SeparatorMatch(seps[0], -1)
        for sep in seps:
            # Strictly greater: on a tie the earlier (longer) separator stays
            index = text.rfind(sep)
            if index > best.index:
                best = SeparatorMatch(sep, index)
        return best

    return SeparatorMatchers(seps, starts_with_any, ends_with_any,
                             find_first_of_any, find_last_of_any)


DEFAULT_MATCHERS = build_matchers(DEFAULT_SEPARATORS)

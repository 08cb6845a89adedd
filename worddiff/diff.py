"""
worddiff.diff — Word-aligned diff of two texts.

    get_diff("hello world", "hello earth")
        → [Replace(0, 6, 'hello ', 'hello '), Replace(6, 11, 'world', 'earth')]

PIPELINE:
    1. Resolve options and normalize the separator set
    2. Raw character diff from the engine (diff-match-patch by default)
    3. One Replace per raw op
    4. Two reduction passes with the configured separators
    5. Insertion fix-up around plain spaces
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Sequence, Union

from .core import (
    ConfigurationError, Replace,
    convert_diff_to_replace_set, merge_insertions, reduce_replace_set,
)
from .engine import DiffEngine, myers_diff
from .separators import DEFAULT_SEPARATORS, build_matchers, normalize_separators

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffOptions:
    """
    Settings for get_diff.

    separators: strings that may sit between words.  Empty strings are
                ignored; at least one non-empty separator is required.
    engine:     callable producing the raw (op, text) edit script.
    """
    separators: Sequence[str] = DEFAULT_SEPARATORS
    engine: DiffEngine = myers_diff

    def __post_init__(self):
        # A bare string is left alone so normalize_separators can reject it
        if not isinstance(self.separators, str):
            object.__setattr__(self, 'separators', tuple(self.separators))

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "DiffOptions":
        """Return a copy with `overrides` applied over these options."""
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(f"Unknown diff options: {sorted(unknown)}")
        return replace(self, **overrides)


DEFAULT_OPTIONS = DiffOptions()


def _resolve_options(
    options: Union[DiffOptions, Mapping[str, Any], None]
) -> DiffOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, DiffOptions):
        return options
    if isinstance(options, Mapping):
        return DEFAULT_OPTIONS.merged(options)
    raise TypeError(f"options must be DiffOptions or a mapping, got {type(options).__name__}")


def get_diff(
    original: str,
    fixed: str,
    options: Union[DiffOptions, Mapping[str, Any], None] = None,
) -> list[Replace]:
    """
    Compute a word-aligned list of Replace fragments from `original` to `fixed`.

    Raises ConfigurationError when no non-empty separator is configured
    or the engine is not callable.  The engine is not called in that case.
    """
    opts = _resolve_options(options)

    separators = normalize_separators(opts.separators)
    if not separators:
        raise ConfigurationError(
            f"Separators should contain at least one non-empty separator, "
            f"got {list(opts.separators)!r}"
        )
    if not callable(opts.engine):
        raise ConfigurationError(f"Diff engine must be callable, got {opts.engine!r}")

    matchers = build_matchers(separators)

    raw = opts.engine(original, fixed)
    replaces = convert_diff_to_replace_set(raw)
    logger.debug("get_diff: %d raw ops", len(replaces))

    # One left-to-right pass can leave a mergeable pair behind it; the
    # second pass picks those up.
    reduced = reduce_replace_set(reduce_replace_set(replaces, matchers), matchers)
    logger.debug("get_diff: %d fragments after reduction", len(reduced))

    return merge_insertions(reduced)

"""
Named pattern matchers with explicit priority.

Each lexical rule of the analyzer is a :class:`PatternMatcher`: a name plus a
function returning a structured result or None. :func:`first_match` tries a
sequence of matchers in order and returns the first result, so fallbacks are
data instead of nested conditionals.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

logger = logging.getLogger("spell-damage.parsing")

T = TypeVar("T")


@dataclass(frozen=True)
class PatternMatcher(Generic[T]):
    """A named lexical rule."""
    name: str
    parse: Callable[[str], T | None]

    def __call__(self, text: str) -> T | None:
        return self.parse(text)


def first_match(matchers: Sequence[PatternMatcher[T]], text: str) -> T | None:
    """Return the result of the first matcher that recognizes ``text``.

    Empty results (None, empty list/tuple) count as no match.
    """
    if not text:
        return None
    for matcher in matchers:
        result = matcher(text)
        if result:
            logger.debug(f"Matcher '{matcher.name}' recognized {text[:60]!r}")
            return result
    return None

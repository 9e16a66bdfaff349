"""
Builders which turn plain data into rule lists.

Use these to assemble rule lists for :func:`countable.pluralize_with` and friends - e.g.

    rules = make_match_mapping([("$", "s")]) + make_irregular_mapping([("person", "people")])

Each returns a tuple, so the results can be concatenated and never need copying.
"""

from __future__ import annotations

from typing import Iterable, Optional, Pattern, Tuple

from countable.errors import PatternCompileError
from countable.language_tools import _regex
from countable.language_tools.rules import ExactRule, PatternRule
from countable.utils.logging import get_logger

log = get_logger("mappings")


def _compile_pattern(pattern: str, strict: bool) -> Optional[Pattern[str]]:
    try:
        return _regex.compile(pattern, case_insensitive=True)
    except _regex.error as e:
        if strict:
            raise PatternCompileError(pattern, e) from e
        log.warning("Pattern %r does not compile (%s) - the rule will never match", pattern, e)
        return None


def make_match_mapping(pairs: Iterable[Tuple[str, str]], strict: bool = False) -> Tuple[PatternRule, ...]:
    """
    Makes one pattern rule per (pattern, replacement) pair, e.g. [("(octop|vir)us$", "\\1i")].

    Patterns are compiled here - once - and matched case-insensitively.

    :param pairs:
    :param strict: If True, raise PatternCompileError for a pattern which doesn't compile.
                   Otherwise the rule is kept, but can never match.
    :return:
    """
    return tuple(
        PatternRule(pattern, replacement, _compile_pattern(pattern, strict)) for pattern, replacement in pairs
    )


def make_irregular_mapping(pairs: Iterable[Tuple[str, str]]) -> Tuple[ExactRule, ...]:
    """
    Makes a simple list of mappings from singular to plural, e.g [("person", "people")].
    """
    return tuple(ExactRule(singular, plural) for singular, plural in pairs)


def make_uncountable_mapping(words: Iterable[str]) -> Tuple[ExactRule, ...]:
    """
    Makes a list of uncountables - words which don't have separate singular and plural versions, e.g ["fish", "money"].
    """
    return tuple(ExactRule(word, word) for word in words)

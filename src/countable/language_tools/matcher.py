"""
The match engine - picks the rule which applies to a word and applies it.

Rules are searched from the END of the list back towards the start, and the first one to produce a result wins.
So a rule appended to a list overrides anything earlier in it - which is how specific words (irregulars,
uncountables) get to override the general patterns without anything having to be deleted.

If no rule applies the word comes back unchanged - a lookup never fails.
"""

from __future__ import annotations

import enum
from typing import Optional, Sequence, Tuple

from countable import constants
from countable.language_tools import _regex
from countable.language_tools.rules import ExactRule, PatternRule, Rule
from countable.utils.logging import get_logger

log = get_logger("matcher")


class Direction(enum.Enum):
    """
    Which way a lookup is going.
    """

    PLURALIZE = "pluralize"
    SINGULARIZE = "singularize"


def apply_rule(direction: Direction, rule: Rule, word: str) -> Optional[str]:
    """
    Try a single rule against the word.

    :param direction:
    :param rule:
    :param word:
    :return: The transformed word - or None if the rule does not apply
    """
    if isinstance(rule, ExactRule):
        if direction is Direction.PLURALIZE:
            return rule.word_b if word == rule.word_a else None
        return rule.word_a if word == rule.word_b else None

    if isinstance(rule, PatternRule):
        if rule.compiled is None:
            return None
        if not _regex.test(rule.compiled, word):
            return None
        # A failed substitution after a successful test counts as no match
        return _regex.substitute_first(rule.compiled, word, rule.replacement)

    raise TypeError("Not an inflection rule: {!r}".format(rule))


def _scan(direction: Direction, rules: Sequence[Rule], word: str) -> Tuple[Optional[Rule], Optional[str]]:
    for rule in reversed(rules):
        result = apply_rule(direction, rule, word)
        if result is not None:
            return rule, result
    return None, None


def find_rule(direction: Direction, rules: Sequence[Rule], word: str) -> Optional[Rule]:
    """
    Return the rule which would decide a lookup of word - None if no rule applies.
    """
    return _scan(direction, rules, word)[0]


def lookup(direction: Direction, rules: Sequence[Rule], word: str) -> str:
    """
    Transform word using the last rule in rules which applies to it.

    :param direction: Pluralizing or singularizing
    :param rules: The rule list - later rules take precedence
    :param word:
    :return: The transformed word - or word itself, if nothing matched
    """
    rule, result = _scan(direction, rules, word)
    if rule is None:
        if constants.VERBOSE_DEBUG:
            log.debug("%s %r: no rule applies", direction.value, word)
        return word

    if constants.VERBOSE_DEBUG:
        log.debug("%s %r -> %r via %r", direction.value, word, result, rule)
    return result

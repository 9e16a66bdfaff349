"""
The two kinds of inflection rule.

A rule table (a "rule list") is just an ordered sequence of these. Later rules take precedence over earlier ones -
see :mod:`countable.language_tools.matcher`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Pattern, Union


@dataclass(frozen=True)
class ExactRule:
    """
    A literal singular/plural pair - e.g. ("person", "people").

    An uncountable word is an exact rule pairing the word with itself.
    """

    word_a: str
    word_b: str


@dataclass(frozen=True)
class PatternRule:
    """
    A case-insensitive regex and the template used to rewrite whatever it matches.

    ``compiled`` is None when ``pattern`` failed to compile - such a rule never matches anything.
    """

    pattern: str
    replacement: str
    compiled: Optional[Pattern[str]] = field(default=None, compare=False, repr=False)

    @property
    def is_compiled(self) -> bool:
        return self.compiled is not None


Rule = Union[ExactRule, PatternRule]


def is_uncountable(rule: Rule) -> bool:
    """
    True if the rule freezes a word - i.e. it's an exact rule with the same singular and plural.
    """
    return isinstance(rule, ExactRule) and rule.word_a == rule.word_b

"""
Tools use to map singular words to plurals and visa-versa.

The plain functions use the default English tables. The "_with" versions take a rule list built from
:mod:`countable.language_tools.mappings` - and use ONLY those rules, the defaults are not mixed in.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence, Tuple

from countable.constants import SINGULAR_COUNT
from countable.language_tools.data import DEFAULT_IRREGULARS, DEFAULT_PLURALS, DEFAULT_SINGULARS, DEFAULT_UNCOUNTABLES
from countable.language_tools.mappings import make_irregular_mapping, make_match_mapping, make_uncountable_mapping
from countable.language_tools.matcher import Direction, lookup
from countable.language_tools.rules import Rule


# The general patterns go first - so the irregulars and uncountables, coming later, are tried before them


@lru_cache(maxsize=None)
def default_plural_rules() -> Tuple[Rule, ...]:
    """
    The default rule list used by :func:`pluralize`.
    """
    return (
        make_match_mapping(DEFAULT_PLURALS)
        + make_uncountable_mapping(DEFAULT_UNCOUNTABLES)
        + make_irregular_mapping(DEFAULT_IRREGULARS)
    )


@lru_cache(maxsize=None)
def default_singular_rules() -> Tuple[Rule, ...]:
    """
    The default rule list used by :func:`singularize`.
    """
    return (
        make_match_mapping(DEFAULT_SINGULARS)
        + make_uncountable_mapping(DEFAULT_UNCOUNTABLES)
        + make_irregular_mapping(DEFAULT_IRREGULARS)
    )


def pluralize(word: str) -> str:
    """
    Pluralize a word using the default English tables.
    """
    return lookup(Direction.PLURALIZE, default_plural_rules(), word)


def singularize(word: str) -> str:
    """
    Singularize a word using the default English tables.
    """
    return lookup(Direction.SINGULARIZE, default_singular_rules(), word)


def inflect(word: str, count: int) -> str:
    """
    Inflect a word given any number - singular for exactly one, plural for everything else (including 0).
    """
    if count == SINGULAR_COUNT:
        return singularize(word)
    return pluralize(word)


def pluralize_with(rules: Sequence[Rule], word: str) -> str:
    """
    Pluralize a word given a custom mapping.

    Build the rules with a combination of `make_uncountable_mapping` `make_irregular_mapping` `make_match_mapping`.
    """
    return lookup(Direction.PLURALIZE, rules, word)


def singularize_with(rules: Sequence[Rule], word: str) -> str:
    """
    Singularize a word given a custom mapping.

    Build the rules with a combination of `make_uncountable_mapping` `make_irregular_mapping` `make_match_mapping`.
    """
    return lookup(Direction.SINGULARIZE, rules, word)


def inflect_with(rules: Sequence[Rule], word: str, count: int) -> str:
    """
    Inflect a word given any number and a custom mapping.
    """
    if count == SINGULAR_COUNT:
        return singularize_with(rules, word)
    return pluralize_with(rules, word)


def singular_plural_mapper(word: str) -> str:
    """
    Takes a word. Works out its plural form. Returns it.
    """
    return pluralize(word)


def plural_singular_mapper(word: str) -> str:
    """
    Takes a word. Works out it's singular form. Returns it.
    """
    return singularize(word)

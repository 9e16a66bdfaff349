"""
countable - pluralize and singularize English nouns with a declarative, overridable rule table.

Usage:
    from countable import pluralize, singularize, inflect
    pluralize("octopus")  # 'octopi'
    inflect("cat", 1)     # 'cat'

    # Custom rules - later rules override earlier ones
    from countable import make_match_mapping, make_irregular_mapping, pluralize_with
    rules = make_match_mapping([("$", "s")]) + make_irregular_mapping([("person", "people")])
    pluralize_with(rules, "person")  # 'people'
"""

from countable.constants import __version__
from countable.errors import CountableException, PatternCompileError, RuleDefinitionError
from countable.language_tools import (
    Direction,
    ExactRule,
    PatternRule,
    Rule,
    default_plural_rules,
    default_singular_rules,
    inflect,
    inflect_with,
    lookup,
    make_irregular_mapping,
    make_match_mapping,
    make_uncountable_mapping,
    pluralize,
    pluralize_with,
    singularize,
    singularize_with,
)

__all__ = [
    "__version__",
    # pluralizers
    "pluralize",
    "singularize",
    "inflect",
    "pluralize_with",
    "singularize_with",
    "inflect_with",
    "default_plural_rules",
    "default_singular_rules",
    # mappings
    "make_match_mapping",
    "make_irregular_mapping",
    "make_uncountable_mapping",
    # rules / matcher
    "Rule",
    "ExactRule",
    "PatternRule",
    "Direction",
    "lookup",
    # errors
    "CountableException",
    "RuleDefinitionError",
    "PatternCompileError",
]

"""
Singular/plural inflection of English nouns, driven by an overridable rule table.
"""

from countable.language_tools.mappings import make_irregular_mapping, make_match_mapping, make_uncountable_mapping
from countable.language_tools.matcher import Direction, apply_rule, find_rule, lookup
from countable.language_tools.pluralizers import (
    default_plural_rules,
    default_singular_rules,
    inflect,
    inflect_with,
    pluralize,
    pluralize_with,
    singularize,
    singularize_with,
)
from countable.language_tools.rules import ExactRule, PatternRule, Rule, is_uncountable

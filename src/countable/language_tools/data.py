"""
Default English inflection tables.

Pattern tables run from the most general rule to the most specific - the match engine searches from the end, so the
specific rules get first go. Based on the ActiveSupport inflection tables.
"""

# (pattern, replacement) - singular -> plural
DEFAULT_PLURALS = (
    ("$", "s"),
    ("s$", "s"),
    ("^(ax|test)is$", r"\1es"),
    ("(octop|vir)us$", r"\1i"),
    ("(octop|vir)i$", r"\1i"),
    ("(alias|status)$", r"\1es"),
    ("(bu)s$", r"\1ses"),
    ("(buffal|tomat|potat|her|ech|torped|vet)o$", r"\1oes"),
    ("([ti])um$", r"\1a"),
    ("([ti])a$", r"\1a"),
    ("sis$", "ses"),
    ("(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    ("(hive)$", r"\1s"),
    ("([^aeiouy]|qu)y$", r"\1ies"),
    ("(x|ch|ss|sh)$", r"\1es"),
    ("(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    ("^(m|l)ouse$", r"\1ice"),
    ("^(m|l)ice$", r"\1ice"),
    ("^(ox)$", r"\1en"),
    ("^(oxen)$", r"\1"),
    ("(quiz)$", r"\1zes"),
)

# (pattern, replacement) - plural -> singular
DEFAULT_SINGULARS = (
    ("s$", ""),
    ("(ss)$", r"\1"),
    ("(n)ews$", r"\1ews"),
    ("([ti])a$", r"\1um"),
    ("((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$", r"\1sis"),
    ("(^analy)(sis|ses)$", r"\1sis"),
    ("([^f])ves$", r"\1fe"),
    ("(hive)s$", r"\1"),
    ("(tive)s$", r"\1"),
    ("([lr])ves$", r"\1f"),
    ("([^aeiouy]|qu)ies$", r"\1y"),
    ("(s)eries$", r"\1eries"),
    ("(m)ovies$", r"\1ovie"),
    ("(x|ch|ss|sh)es$", r"\1"),
    ("^(m|l)ice$", r"\1ouse"),
    ("(bus)(es)?$", r"\1"),
    ("(o)es$", r"\1"),
    ("(shoe)s$", r"\1"),
    ("(cris|test)(is|es)$", r"\1is"),
    ("^(a)x[ie]s$", r"\1xis"),
    ("(octop|vir)(us|i)$", r"\1us"),
    ("(alias|status)(es)?$", r"\1"),
    ("^(ox)en", r"\1"),
    ("(vert|ind)ices$", r"\1ex"),
    ("(matr)ices$", r"\1ix"),
    ("(quiz)zes$", r"\1"),
    ("(database)s$", r"\1"),
)

# (singular, plural)
DEFAULT_IRREGULARS = (
    ("person", "people"),
    ("man", "men"),
    ("woman", "women"),
    ("child", "children"),
    ("sex", "sexes"),
    ("move", "moves"),
    ("zombie", "zombies"),
    ("goose", "geese"),
    ("foot", "feet"),
    ("tooth", "teeth"),
    ("genus", "genera"),
    ("criterion", "criteria"),
)

DEFAULT_UNCOUNTABLES = (
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "deer",
    "moose",
    "jeans",
    "police",
    "news",
    "aircraft",
)

from __future__ import annotations

import pytest


def test_compile_is_case_insensitive_by_default() -> None:
    from countable.language_tools import _regex

    assert _regex.test(_regex.compile("ox$"), "OX")
    assert not _regex.test(_regex.compile("ox$", case_insensitive=False), "OX")


def test_compile_raises_on_bad_pattern() -> None:
    from countable.language_tools import _regex

    with pytest.raises(_regex.error):
        _regex.compile("(")


def test_test_uses_search_semantics() -> None:
    from countable.language_tools import _regex

    assert _regex.test(_regex.compile("ouse"), "mouse")
    assert not _regex.test(_regex.compile("^ouse"), "mouse")


def test_substitute_first() -> None:
    from countable.language_tools import _regex

    m = _regex.compile("(x|ch|ss|sh)$")
    assert _regex.substitute_first(m, "church", r"\1es") == "churches"
    assert _regex.substitute_first(_regex.compile("s"), "sass", "z") == "zass"


def test_substitute_first_reports_failure_as_none() -> None:
    from countable.language_tools import _regex

    assert _regex.substitute_first(_regex.compile("y$"), "cat", "ies") is None
    assert _regex.substitute_first(_regex.compile("(a)"), "cat", r"\3") is None

"""
Error hierarchy tests.
"""

from __future__ import annotations

import pytest


def test_every_error_is_a_countable_exception() -> None:
    from countable.errors import (
        BadInputException,
        CountableException,
        InputIntegrityError,
        PatternCompileError,
        RuleDefinitionError,
    )

    assert InputIntegrityError is BadInputException
    for cls in (BadInputException, RuleDefinitionError, PatternCompileError):
        assert issubclass(cls, CountableException)
    assert issubclass(PatternCompileError, RuleDefinitionError)


def test_bad_input_str_is_repr_of_argument() -> None:
    from countable.errors import BadInputException

    assert str(BadInputException("oops")) == "'oops'"


def test_pattern_compile_error_keeps_its_cause() -> None:
    import re

    from countable.errors import PatternCompileError

    try:
        re.compile("(")
    except re.error as e:
        err = PatternCompileError("(", e)
    else:
        pytest.fail("pattern compiled")

    assert err.pattern == "("
    assert isinstance(err.cause, re.error)
    assert str(err).startswith("cannot compile pattern '('")
    assert str(PatternCompileError("[")) == "cannot compile pattern '['"

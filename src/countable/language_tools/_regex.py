# -*- coding: utf-8 -*-
"""
The small slice of a regex engine the match engine needs.

Thin wrapper around Python's stdlib ``re``. Only three operations are used by the rest of the package - compile a
pattern (case-insensitively, by default), test a string against it and substitute the first match. Keeping them
here means the matcher never has to know which engine is doing the work.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern

error = re.error

IGNORECASE = re.IGNORECASE


def compile(pattern: str, case_insensitive: bool = True) -> Pattern[str]:
    """
    Compile the given pattern text - raises :data:`error` if it is not a valid expression.
    """
    return re.compile(pattern, IGNORECASE if case_insensitive else 0)


def test(matcher: Pattern[str], text: str) -> bool:
    """
    Does the pattern match anywhere in the text? Anchoring is entirely up to the pattern.
    """
    return matcher.search(text) is not None


def substitute_first(matcher: Pattern[str], text: str, template: str) -> Optional[str]:
    """
    Replace the first match of the pattern in text with the expanded template.

    :param matcher: A compiled pattern
    :param text:
    :param template: Replacement template - may contain group references (\\1, \\g<name>)
    :return: The new string - or None if the pattern does not match, or the template cannot be expanded against it
    """
    if matcher.search(text) is None:
        return None
    try:
        return matcher.sub(template, text, count=1)
    except (error, IndexError):
        # Template refers to a group the pattern does not have
        return None

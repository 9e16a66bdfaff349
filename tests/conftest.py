"""Test configuration.

Runs both against an installed countable (`pip install -e .`) and a plain source checkout - in the latter case
`src/` is put on the path first.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    if src.is_dir() and str(src) not in sys.path:
        # Local sources win over any installed copy
        sys.path.insert(0, str(src))


_ensure_src_on_path()


@pytest.fixture
def tiny_rules():
    """
    A small hand built rule list - general pattern first, then the words which override it.
    """
    from countable.language_tools.mappings import make_irregular_mapping, make_match_mapping, make_uncountable_mapping

    return (
        make_match_mapping([("$", "s"), ("(x|ch|ss|sh)$", r"\1es")])
        + make_uncountable_mapping(["sheep"])
        + make_irregular_mapping([("person", "people")])
    )


@pytest.fixture
def verbose_debug(monkeypatch, caplog):
    """
    Switch on the matcher's per-lookup logging and capture it.
    """
    from countable import constants

    monkeypatch.setattr(constants, "VERBOSE_DEBUG", True)
    caplog.set_level(logging.DEBUG, logger=constants.DEFAULT_LOG_NAME)
    return caplog

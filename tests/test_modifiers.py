#!/usr/bin/env python3
"""
Test module for text-case modifiers.
File: tests/test_modifiers.py

Usage:  pytest tests/test_modifiers.py
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from genealogy_filename.diagnostics import DiagnosticCollector
from genealogy_filename.subtemplates.modifiers import (
    apply_modifier,
    last_modifier,
    to_title_case
)
from genealogy_filename.subtemplates.key_maps import NAME_KEY_MAP
from genealogy_filename.subtemplates.template_engine import process_sub_template


@pytest.mark.parametrize("value, modifier, expected", [
    ("john", "upper", "JOHN"),
    ("SMITH", "lower", "smith"),
    ("john william", "title", "John William"),
    ("john", "abbrev", "J"),
    ("a", "abbrev", "A"),
    # Case-insensitive modifier names
    ("john", "UPPER", "JOHN"),
    ("john", "Upper", "JOHN"),
    ("SMITH", "LOWER", "smith"),
    ("john william", "TITLE", "John William"),
    ("john", "ABBREV", "J"),
])
def test_known_modifiers(value, modifier, expected):
    assert apply_modifier(value, modifier) == expected


def test_title_case_apostrophe_does_not_start_word():
    assert apply_modifier("o'brien", "title") == "O'brien"


@pytest.mark.parametrize("text, expected", [
    ("john 123", "John 123"),
    ("NEW YORK", "New York"),
    ("smith-jones", "Smith-jones"),
    ("  spaced   out ", "  Spaced   Out "),
    ("", ""),
])
def test_to_title_case(text, expected):
    assert to_title_case(text) == expected


def test_empty_value_or_modifier_is_noop():
    collector = DiagnosticCollector()
    assert apply_modifier("", "upper", collector) == ""
    assert apply_modifier("john", "", collector) == "john"
    assert apply_modifier("john", None, collector) == "john"
    assert collector.messages == []


def test_unknown_modifier_reports_and_returns_value():
    collector = DiagnosticCollector()
    result = apply_modifier("Smith", "invalid", collector)

    assert result == "Smith"
    assert collector.messages == ["Unknown modifier: invalid"]


def test_unknown_modifier_default_reporter_prints_warning(capsys):
    assert apply_modifier("Smith", "shout") == "Smith"
    assert "Unknown modifier: shout" in capsys.readouterr().err


def test_abbrev_is_single_character():
    assert apply_modifier("ßmith", "abbrev") == "S"
    assert len(apply_modifier("robert", "abbrev")) == 1


@pytest.mark.parametrize("value", ["john", "John Smith", "o'brien", "MIXED case 42"])
def test_upper_is_idempotent(value):
    once = apply_modifier(value, "upper")
    assert apply_modifier(once, "upper") == once


@pytest.mark.parametrize("chain, expected", [
    ("upper", "upper"),
    ("upper:lower", "lower"),
    ("upper:lower:title", "title"),
    ("upper:", ""),
    ("", ""),
    (None, ""),
])
def test_last_modifier(chain, expected):
    assert last_modifier(chain) == expected


@pytest.mark.parametrize("chain, expected", [
    ("upper:lower", "john robert"),
    ("title:abbrev", "J"),
    ("lower:upper:title", "John Robert"),
])
def test_chain_in_template_uses_last_modifier(chain, expected):
    record = {'given': "jOhN rObErT"}
    assert process_sub_template(f"{{GIVEN:{chain}}}", record, NAME_KEY_MAP) == expected

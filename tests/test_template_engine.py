#!/usr/bin/env python3
"""
Test module for the placeholder substitution engine.
File: tests/test_template_engine.py

Usage:  pytest tests/test_template_engine.py
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from genealogy_filename.diagnostics import DiagnosticCollector
from genealogy_filename.subtemplates.key_maps import (
    COMBINED_KEY_MAP,
    DATE_KEY_MAP,
    NAME_KEY_MAP,
    PLACE_KEY_MAP
)
from genealogy_filename.subtemplates.template_engine import (
    LiteralSegment,
    PlaceholderSegment,
    TemplateEngine,
    TemplateError,
    format_for_placeholder,
    parse_template,
    process_sub_template
)


DATE_RECORD = {'year': '2024', 'month': '03', 'day': '05'}
NAME_RECORD = {'given': 'john', 'middle': 'robert', 'surname': 'smith'}


def test_parse_template_segments():
    segments = parse_template("ID-{SURNAME:upper}.{GIVEN}!")
    assert segments == [
        LiteralSegment("ID-"),
        PlaceholderSegment("{SURNAME:upper}", "SURNAME", "upper"),
        LiteralSegment("."),
        PlaceholderSegment("{GIVEN}", "GIVEN", None),
        LiteralSegment("!"),
    ]


@pytest.mark.parametrize("template", [
    "{name}",            # lower-case name is not a token
    "{SURNAME:}",        # empty modifier suffix
    "{SUR NAME}",
    "{SURNAME:up per}",
    "{1}",
    "{}",
])
def test_parse_template_rejects_malformed_tokens(template):
    assert parse_template(template) == [LiteralSegment(template)]


def test_empty_template_returns_empty_string():
    assert process_sub_template("", NAME_RECORD, NAME_KEY_MAP) == ""
    assert process_sub_template(None, NAME_RECORD, NAME_KEY_MAP) == ""


@pytest.mark.parametrize("template", [
    "plain text",
    "  spaces\tand\ttabs  ",
    "{lower} and } and {",
    "punctuation: .,;!?",
])
def test_template_without_tokens_is_unchanged(template):
    collector = DiagnosticCollector()
    assert process_sub_template(template, NAME_RECORD, NAME_KEY_MAP, reporter=collector) == template
    assert collector.messages == []


def test_basic_substitution_preserves_literals():
    result = process_sub_template("{GIVEN} - {SURNAME}", NAME_RECORD, NAME_KEY_MAP)
    assert result == "john - smith"


def test_missing_values_use_handler_without_modifiers():
    record = {'given': 'John', 'middle': None, 'surname': ''}
    result = process_sub_template("{SURNAME:upper}.{GIVEN}.{MIDDLE:abbrev}", record, NAME_KEY_MAP)
    assert result == "x.John.x"


def test_missing_key_in_record_counts_as_missing():
    assert process_sub_template("{MIDDLE}", {'given': 'John'}, NAME_KEY_MAP) == "x"


def test_custom_missing_value_handler():
    result = process_sub_template("{YYYY}-{MM}", {'year': '1850'}, DATE_KEY_MAP,
                                  missing_value_handler="unknown")
    assert result == "1850-unknown"


def test_empty_value_with_modifier_uses_handler():
    assert process_sub_template("{GIVEN:upper}", {'given': ''}, NAME_KEY_MAP) == "x"


def test_unknown_placeholder_kept_verbatim_and_reported():
    collector = DiagnosticCollector()
    result = process_sub_template("{NAME:upper}_{GIVEN}", NAME_RECORD, NAME_KEY_MAP,
                                  reporter=collector)

    assert result == "{NAME:upper}_john"
    assert collector.messages == ["Unknown placeholder: NAME"]


def test_unknown_modifier_keeps_value():
    collector = DiagnosticCollector()
    result = process_sub_template("{SURNAME:invalid}", {'surname': 'Smith'}, NAME_KEY_MAP,
                                  reporter=collector)

    assert result == "Smith"
    assert collector.messages == ["Unknown modifier: invalid"]


@pytest.mark.parametrize("template, expected", [
    ("{GIVEN:upper:lower}", "john"),
    ("{GIVEN:lower:upper}", "JOHN"),
    ("{GIVEN:upper:lower:title}", "John"),
    ("{GIVEN:UPPER}", "JOHN"),
    ("{GIVEN::upper}", "JOHN"),
])
def test_modifier_chain_applies_last_only(template, expected):
    assert process_sub_template(template, NAME_RECORD, NAME_KEY_MAP) == expected


def test_non_string_values_are_coerced():
    record = {'year': 1850, 'month': 6, 'day': 1}
    assert process_sub_template("{YYYY}-{MM}-{DD}", record, DATE_KEY_MAP) == "1850-06-01"


@pytest.mark.parametrize("placeholder, value, expected", [
    ("MM", "3", "03"),
    ("DD", "5", "05"),
    ("MM", "12", "12"),
    ("MM", "123", "123"),
    ("YY", "2024", "24"),
    ("YY", "1905", "05"),
    ("YY", "2000", "00"),
    ("YYYY", "2024", "2024"),
    ("M", "3", "3"),
    ("D", "5", "5"),
    ("MM", "Mar", "Mar"),
    ("YY", "abcd", "abcd"),
    ("SURNAME", "7", "7"),
])
def test_format_for_placeholder(placeholder, value, expected):
    assert format_for_placeholder(placeholder, value) == expected


def test_date_formatting_happens_before_modifiers():
    record = {'year': '2024', 'month': 'mar', 'day': '5'}
    assert process_sub_template("{MM:upper}/{DD:abbrev}/{YY}", record, DATE_KEY_MAP) == "MAR/0/24"


def test_date_round_trip():
    assert process_sub_template("{YYYY}-{MM}-{DD}", DATE_RECORD, DATE_KEY_MAP) == "2024-03-05"


def test_present_fields_leave_no_braces():
    record = {key: 'v' for key in set(COMBINED_KEY_MAP.values())}
    template = ''.join(f"{{{name}}}" for name in COMBINED_KEY_MAP)
    result = process_sub_template(template, record, COMBINED_KEY_MAP)
    assert '{' not in result and '}' not in result


def test_aliases_share_field_keys():
    record = {'country': 'USA', 'state': 'Ohio', 'county': 'Cuyahoga', 'city': 'Cleveland'}
    full = process_sub_template("{COUNTRY}.{STATE}.{COUNTY}.{CITY}", record, PLACE_KEY_MAP)
    short = process_sub_template("{C}.{S}.{CO}.{CI}", record, PLACE_KEY_MAP)
    assert full == short == "USA.Ohio.Cuyahoga.Cleveland"


def test_key_maps_are_read_only():
    with pytest.raises(TypeError):
        DATE_KEY_MAP['YEAR'] = 'year'


class TestTemplateEngine:
    """TemplateEngine bound to a key map."""

    def test_process_matches_function(self):
        engine = TemplateEngine(NAME_KEY_MAP)
        assert engine.process("{SURNAME:upper}.{GIVEN:title}", NAME_RECORD) == "SMITH.John"

    def test_get_required_placeholders(self):
        engine = TemplateEngine(DATE_KEY_MAP)
        assert engine.get_required_placeholders("{YYYY}.{MM}.{MM}.{FOO}") == {'YYYY', 'MM', 'FOO'}
        assert engine.get_required_placeholders("") == set()

    @pytest.mark.parametrize("template", [
        "",
        None,
        "{YYYY}.{MM}.{DD}",
        "{YY}-{M}-{D}",
        "{YYYY:upper:lower}",
        "literal only",
    ])
    def test_validate_accepts(self, template):
        engine = TemplateEngine(DATE_KEY_MAP)
        assert engine.validate_template(template) == (True, "")

    @pytest.mark.parametrize("template, fragment", [
        ("{YYYY}.{MONTH}", "Unknown placeholder(s): MONTH"),
        ("{YYYY:shout}", "Unknown modifier(s): shout"),
        ("{YYYY:upper:}", "Unknown modifier(s): upper:"),
        ("{yyyy}", "Invalid brace syntax"),
        ("{YYYY", "Invalid brace syntax"),
        ("YYYY}", "Invalid brace syntax"),
    ])
    def test_validate_rejects(self, template, fragment):
        engine = TemplateEngine(DATE_KEY_MAP)
        is_valid, message = engine.validate_template(template)
        assert not is_valid
        assert fragment in message

    def test_validate_does_not_report(self):
        collector = DiagnosticCollector()
        engine = TemplateEngine(DATE_KEY_MAP, reporter=collector)
        engine.validate_template("{FOO:bar}")
        assert collector.messages == []

    def test_require_valid(self):
        engine = TemplateEngine(NAME_KEY_MAP)
        assert engine.require_valid("{GIVEN}") == "{GIVEN}"
        with pytest.raises(TemplateError, match="Unknown placeholder"):
            engine.require_valid("{FIRST}")

    def test_preview_substitution(self):
        collector = DiagnosticCollector()
        engine = TemplateEngine(NAME_KEY_MAP, reporter=collector)
        record = {'given': 'john', 'middle': None, 'surname': 'smith'}

        preview = engine.preview_substitution("{SURNAME:lower:upper}.{MIDDLE}.{AGE}", record)

        assert preview['result'] == "SMITH.x.{AGE}"
        surname, middle, age = preview['substitutions']
        assert surname['field'] == 'surname'
        assert surname['found_value'] == 'smith'
        assert surname['modifier'] == 'upper'
        assert surname['final_value'] == 'SMITH'
        assert middle['used_missing_value'] is True
        assert middle['final_value'] == 'x'
        assert age['recognized'] is False
        assert collector.messages == ["Unknown placeholder: AGE"]

    def test_preview_empty_template(self):
        preview = TemplateEngine(NAME_KEY_MAP).preview_substitution("", NAME_RECORD)
        assert preview['result'] == ""
        assert preview['substitutions'] == []

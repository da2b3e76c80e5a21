"""
Placeholder substitution for date, name and place sub-templates.
File: genealogy_filename/subtemplates/template_engine.py

Handles sub-templates like "{SURNAME:upper}.{GIVEN}" or "{MM}/{DD}/{YY}"
against a record of parsed fields, with a missing-value handler for
absent fields and optional text modifiers.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from genealogy_filename.constants import MISSING_SENTINEL
from genealogy_filename.diagnostics import Reporter, resolve_reporter
from genealogy_filename.subtemplates.modifiers import (
    SUPPORTED_MODIFIERS,
    apply_modifier,
    last_modifier
)
from genealogy_filename.subtemplates.subtemplate_regex_patterns import (
    PLACEHOLDER_RGX,
    STRAY_BRACE_RGX
)


class TemplateError(Exception):
    """Exception for template processing errors."""
    pass


@dataclass(frozen=True)
class LiteralSegment:
    text: str


@dataclass(frozen=True)
class PlaceholderSegment:
    token: str                      # original text, e.g. "{SURNAME:upper}"
    name: str                       # "SURNAME"
    modifier_chain: Optional[str]   # "upper", "upper:lower", or None


Segment = Union[LiteralSegment, PlaceholderSegment]


@dataclass
class PlaceholderResolution:
    """Outcome of resolving one placeholder token."""
    token: str
    placeholder: str
    field_key: Optional[str]
    raw_value: Optional[str]
    modifier: Optional[str]
    final_value: str
    recognized: bool
    used_missing_value: bool


def parse_template(template: str) -> list[Segment]:
    """
    Split a template into literal and placeholder segments.

    Tokens are matched left to right without overlap; text between them
    (including braces that do not form a valid token) becomes literal.

    Args:
        template: Template string like "{YYYY}.{MM}.{DD}"

    Returns:
        Segments in template order
    """
    segments: list[Segment] = []
    position = 0

    for match in PLACEHOLDER_RGX.finditer(template):
        if match.start() > position:
            segments.append(LiteralSegment(template[position:match.start()]))
        segments.append(PlaceholderSegment(match.group(0), match.group(1), match.group(2)))
        position = match.end()

    if position < len(template):
        segments.append(LiteralSegment(template[position:]))

    return segments


def format_for_placeholder(placeholder: str, value: str) -> str:
    """
    Apply the formatting rule tied to a placeholder name.

    MM and DD are zero-padded to two digits; YY keeps the last two digits
    of the year. Non-numeric values and all other placeholders pass through.
    """
    if not _is_numeric(value):
        return value

    if placeholder in ('MM', 'DD'):
        return value.zfill(2)
    elif placeholder == 'YY':
        return f"{int(value) % 100:02d}"

    return value


def _is_numeric(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _is_missing(value) -> bool:
    return value is None or value == ''


def resolve_placeholder(segment: PlaceholderSegment, record: Mapping,
                        key_map: Mapping[str, str],
                        missing_value_handler: str = MISSING_SENTINEL,
                        reporter: Optional[Reporter] = None) -> PlaceholderResolution:
    """
    Resolve one placeholder token against a record.

    Unknown placeholders are reported and keep their original token text.
    Absent values become the missing-value handler, without modifiers.
    """
    field_key = key_map.get(segment.name)

    if field_key is None:
        resolve_reporter(reporter)(f"Unknown placeholder: {segment.name}")
        return PlaceholderResolution(
            token=segment.token, placeholder=segment.name, field_key=None,
            raw_value=None, modifier=None, final_value=segment.token,
            recognized=False, used_missing_value=False
        )

    value = record.get(field_key)

    if _is_missing(value):
        return PlaceholderResolution(
            token=segment.token, placeholder=segment.name, field_key=field_key,
            raw_value=None, modifier=None, final_value=missing_value_handler,
            recognized=True, used_missing_value=True
        )

    raw_value = str(value)
    final_value = format_for_placeholder(segment.name, raw_value)

    modifier = None
    if segment.modifier_chain:
        modifier = last_modifier(segment.modifier_chain)
        final_value = apply_modifier(final_value, modifier, reporter)

    return PlaceholderResolution(
        token=segment.token, placeholder=segment.name, field_key=field_key,
        raw_value=raw_value, modifier=modifier, final_value=final_value,
        recognized=True, used_missing_value=False
    )


def process_sub_template(template: str, record: Mapping, key_map: Mapping[str, str],
                         missing_value_handler: str = MISSING_SENTINEL,
                         reporter: Optional[Reporter] = None) -> str:
    """
    Substitute every placeholder token in a sub-template.

    Template Syntax:
    - Placeholders: {NAME} where NAME is upper-case letters
    - Modifiers: {NAME:modifier}, case-insensitive
    - Chains: {NAME:mod1:mod2} applies only the last modifier. This is
      the current contract, kept for compatibility; composing chains is a
      candidate for a future revision.

    Examples (date key map):
    - "{MM}/{DD}/{YY}" with year=2024, month=3, day=5 -> "03/05/24"
    - "{YYYY}.{MM}.{DD}" with day missing -> "2024.03.x"

    Args:
        template: Template string; empty or non-string gives ""
        record: Field key -> value; None and "" count as absent
        key_map: Placeholder name -> field key
        missing_value_handler: Text used for absent values
        reporter: Diagnostic callback for unknown placeholders/modifiers

    Returns:
        Template with recognized tokens replaced and everything else verbatim
    """
    if not template or not isinstance(template, str):
        return ''

    parts = []
    for segment in parse_template(template):
        if isinstance(segment, LiteralSegment):
            parts.append(segment.text)
        else:
            resolution = resolve_placeholder(segment, record, key_map,
                                             missing_value_handler, reporter)
            parts.append(resolution.final_value)

    return ''.join(parts)


class TemplateEngine:
    """
    Sub-template processor bound to one key map.

    Examples (name key map):
    - "{SURNAME:upper}.{GIVEN}" -> "SMITH.John"
    - "{GIVEN} {MIDDLE:abbrev} {SURNAME}" -> "John R Smith"
    - "{GIVEN}.{MIDDLE}" with no middle name -> "John.x"
    """

    def __init__(self, key_map: Mapping[str, str],
                 missing_value_handler: str = MISSING_SENTINEL,
                 reporter: Optional[Reporter] = None):
        self.key_map = key_map
        self.missing_value_handler = missing_value_handler
        self.reporter = reporter

    def process(self, template: str, record: Mapping) -> str:
        """Substitute placeholders in template using this engine's key map."""
        return process_sub_template(template, record, self.key_map,
                                    self.missing_value_handler, self.reporter)

    def get_required_placeholders(self, template: str) -> set[str]:
        """
        Get set of all placeholder names used by a template.

        Args:
            template: Template string

        Returns:
            Placeholder names, recognized or not
        """
        if not template or not isinstance(template, str):
            return set()
        return {seg.name for seg in parse_template(template) if isinstance(seg, PlaceholderSegment)}

    def validate_template(self, template: str) -> tuple[bool, str]:
        """
        Validate template syntax against this engine's key map.

        Nothing is reported through the diagnostic channel; problems come
        back in the message instead.

        Args:
            template: Template string to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if template is None or template == '':
            return True, ""

        if not isinstance(template, str):
            return False, "Template must be a string"

        segments = parse_template(template)

        # Braces outside valid tokens, e.g. "{name}" or "{SURNAME"
        for segment in segments:
            if isinstance(segment, LiteralSegment) and STRAY_BRACE_RGX.search(segment.text):
                return False, f"Invalid brace syntax found in '{segment.text}'"

        placeholders = [seg for seg in segments if isinstance(seg, PlaceholderSegment)]

        unknown = [seg.name for seg in placeholders if seg.name not in self.key_map]
        if unknown:
            return False, f"Unknown placeholder(s): {', '.join(dict.fromkeys(unknown))}"

        bad_modifiers = []
        for seg in placeholders:
            if seg.modifier_chain is None:
                continue
            modifier = last_modifier(seg.modifier_chain)
            if modifier.lower() not in SUPPORTED_MODIFIERS:
                bad_modifiers.append(modifier or seg.modifier_chain)
        if bad_modifiers:
            return False, f"Unknown modifier(s): {', '.join(dict.fromkeys(bad_modifiers))}"

        return True, ""

    def require_valid(self, template: str) -> str:
        """
        Return the template unchanged, or raise if it does not validate.

        Raises:
            TemplateError: For invalid template syntax
        """
        is_valid, message = self.validate_template(template)
        if not is_valid:
            raise TemplateError(message)
        return template

    def preview_substitution(self, template: str, record: Mapping) -> dict:
        """
        Preview template substitution token by token.

        Useful for --preview output and debugging.

        Args:
            template: Template string
            record: Field values

        Returns:
            Dictionary with the result and per-token substitution details
        """
        substitutions = []
        parts = []

        if template and isinstance(template, str):
            for segment in parse_template(template):
                if isinstance(segment, LiteralSegment):
                    parts.append(segment.text)
                    continue

                resolution = resolve_placeholder(segment, record, self.key_map,
                                                 self.missing_value_handler, self.reporter)
                parts.append(resolution.final_value)
                substitutions.append({
                    'token': resolution.token,
                    'placeholder': resolution.placeholder,
                    'field': resolution.field_key,
                    'found_value': resolution.raw_value,
                    'modifier': resolution.modifier,
                    'used_missing_value': resolution.used_missing_value,
                    'recognized': resolution.recognized,
                    'final_value': resolution.final_value
                })

        return {
            'template': template,
            'result': ''.join(parts),
            'substitutions': substitutions
        }


# End of file #

"""
Text-case modifiers for placeholder values.
File: genealogy_filename/subtemplates/modifiers.py

Modifiers are written after a colon in a placeholder, e.g. {SURNAME:upper}.
Matching is case-insensitive, so :UPPER, :Upper and :upper are the same.
"""

from typing import Optional

from genealogy_filename.diagnostics import Reporter, resolve_reporter
from genealogy_filename.subtemplates.subtemplate_regex_patterns import TITLE_WORD_RGX


SUPPORTED_MODIFIERS = ('upper', 'lower', 'title', 'abbrev')


def to_title_case(text: str) -> str:
    """
    Capitalize the first letter of each word and lower-case the rest.

    A word starts at a word character and runs to the next whitespace, so
    punctuation inside a word does not start a new one:

        "john william" -> "John William"
        "o'brien"      -> "O'brien"
        "smith-jones"  -> "Smith-jones"
    """
    return TITLE_WORD_RGX.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def apply_modifier(value: str, modifier: str, reporter: Optional[Reporter] = None) -> str:
    """
    Apply a single text modifier to a value.

    Args:
        value: Value already fetched (and date-formatted) by the engine
        modifier: One of upper, lower, title, abbrev (any letter case)
        reporter: Diagnostic callback for unknown modifiers

    Returns:
        Transformed value. Empty values, empty modifiers and unknown
        modifiers return the value unchanged.
    """
    if not modifier or not value:
        return value

    mod = modifier.lower()

    if mod == 'upper':
        return value.upper()
    elif mod == 'lower':
        return value.lower()
    elif mod == 'title':
        return to_title_case(value)
    elif mod == 'abbrev':
        # upper() may expand some characters (e.g. 'ß' -> 'SS')
        return value[0].upper()[:1]

    resolve_reporter(reporter)(f"Unknown modifier: {modifier}")
    return value


def last_modifier(chain: Optional[str]) -> str:
    """
    Pick the modifier that is actually applied from a colon-separated chain.

    Only the last element counts: "upper:lower" behaves exactly like
    "lower". Earlier elements are accepted but ignored. This is kept for
    compatibility with existing templates and may be revisited in favour
    of composing the chain.
    """
    if not chain:
        return ''
    return chain.split(':')[-1]


# End of file #

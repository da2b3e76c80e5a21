"""
Text sanitization for filename generation.
File: genealogy_filename/subtemplates/sanitizer.py
"""

from typing import Optional

from genealogy_filename.subtemplates.subtemplate_regex_patterns import WHITESPACE_NORMALIZE_RGX


def sanitize_for_filename(text: Optional[str]) -> str:
    """
    Collapse every whitespace run into a single dash.

    Examples:
        "Jane DOE"          -> "Jane-DOE"
        "SMITH,  John  R"   -> "SMITH,-John-R"

    Nothing else is touched, so punctuation from the template survives.
    """
    if not text:
        return ''
    return WHITESPACE_NORMALIZE_RGX.sub('-', text)


# End of file #

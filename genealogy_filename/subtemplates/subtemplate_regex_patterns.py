"""
Regex patterns for the sub-template subsection.
File: genealogy_filename/subtemplates/subtemplate_regex_patterns.py
"""

import re

# Placeholder token: {NAME} or {NAME:mod1:mod2}
# Group 1 = placeholder name, group 2 = modifier chain without the leading colon
PLACEHOLDER_RGX = re.compile(r'\{([A-Z]+)(?::([a-zA-Z:]+))?\}')

# Title case: a word character followed by the rest of the non-space run
TITLE_WORD_RGX = re.compile(r'\w\S*')

# Date inputs (ASCII digits only)
ISO_DATE_RGX = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')
PARTIAL_DATE_RGX = re.compile(r'^([0-9]{4})(?:-([0-9]{2}))?$')
QUALIFIED_DATE_RGX = re.compile(
    r'(Abt|Bef|Aft)?\s*([0-9]{4})(?:-([0-9]{2}))?(?:-([0-9]{2}))?'
)
STANDALONE_YEAR_RGX = re.compile(r'\b([0-9]{4})\b')

# Name and filename whitespace handling
WHITESPACE_NORMALIZE_RGX = re.compile(r'\s+')

# Stray braces left after removing valid tokens (template validation)
STRAY_BRACE_RGX = re.compile(r'[{}]')

# End of file #

"""
Sub-template system for genealogy filenames.
File: genealogy_filename/subtemplates/__init__.py

Parses free-text date, name and place fields and renders them through
small placeholder templates with text-case modifiers.
"""

from genealogy_filename.subtemplates.modifiers import apply_modifier, to_title_case
from genealogy_filename.subtemplates.template_engine import (
    TemplateEngine,
    TemplateError,
    process_sub_template
)
from genealogy_filename.subtemplates.parsers import (
    parse_date_input,
    parse_name_input,
    parse_place_input
)
from genealogy_filename.subtemplates.subtemplate_processor import (
    process_date_subtemplate,
    process_name_subtemplate,
    process_place_subtemplate
)
from genealogy_filename.subtemplates.people_formatter import Person, format_additional_people
from genealogy_filename.subtemplates.sanitizer import sanitize_for_filename


__all__ = [
    'apply_modifier',
    'to_title_case',
    'TemplateEngine',
    'TemplateError',
    'process_sub_template',
    'parse_date_input',
    'parse_name_input',
    'parse_place_input',
    'process_date_subtemplate',
    'process_name_subtemplate',
    'process_place_subtemplate',
    'Person',
    'format_additional_people',
    'sanitize_for_filename'
]

# End of file #

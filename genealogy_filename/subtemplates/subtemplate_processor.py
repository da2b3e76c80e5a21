"""
Date, name and place sub-template processing.
File: genealogy_filename/subtemplates/subtemplate_processor.py

Each processor parses one raw form field, then renders it through the
placeholder engine with that field's key map. Output is not sanitized;
callers building a filename do that themselves.
"""

from typing import Optional

from genealogy_filename.constants import (
    DEFAULT_DATE_TEMPLATE,
    DEFAULT_NAME_TEMPLATE,
    DEFAULT_PLACE_TEMPLATE,
    MISSING_SENTINEL
)
from genealogy_filename.diagnostics import Reporter
from genealogy_filename.subtemplates.key_maps import DATE_KEY_MAP, NAME_KEY_MAP, PLACE_KEY_MAP
from genealogy_filename.subtemplates.parsers import (
    parse_date_input,
    parse_name_input,
    parse_place_input
)
from genealogy_filename.subtemplates.template_engine import process_sub_template


def process_date_subtemplate(date_string: Optional[str], template: Optional[str] = None,
                             reporter: Optional[Reporter] = None) -> str:
    """
    Render a date field, e.g. ("2024-03-05", "{MM}/{DD}/{YY}") -> "03/05/24".

    An empty template falls back to "{YYYY}.{MM}.{DD}".
    """
    date_template = template or DEFAULT_DATE_TEMPLATE
    record = parse_date_input(date_string).to_record()
    return process_sub_template(date_template, record, DATE_KEY_MAP,
                                missing_value_handler=MISSING_SENTINEL, reporter=reporter)


def process_name_subtemplate(name_string: Optional[str], template: Optional[str] = None,
                             reporter: Optional[Reporter] = None) -> str:
    """
    Render a name field, e.g. ("John Smith", "{SURNAME:upper}.{GIVEN}") -> "SMITH.John".

    An empty template falls back to "{SURNAME:upper}.{GIVEN}".
    """
    name_template = template or DEFAULT_NAME_TEMPLATE
    record = parse_name_input(name_string).to_record()
    return process_sub_template(name_template, record, NAME_KEY_MAP,
                                missing_value_handler=MISSING_SENTINEL, reporter=reporter)


def process_place_subtemplate(place_string: Optional[str], template: Optional[str] = None,
                              reporter: Optional[Reporter] = None) -> str:
    """
    Render a place field, e.g. ("Cleveland, Ohio, USA", "{COUNTRY}.{STATE}.{CITY}")
    -> "USA.Ohio.Cleveland".

    An empty template falls back to "{COUNTRY}.{STATE}.{COUNTY}.{CITY}".
    """
    place_template = template or DEFAULT_PLACE_TEMPLATE
    record = parse_place_input(place_string).to_record()
    return process_sub_template(place_template, record, PLACE_KEY_MAP,
                                missing_value_handler=MISSING_SENTINEL, reporter=reporter)


# End of file #

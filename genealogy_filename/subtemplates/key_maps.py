"""
Placeholder key maps for the date, name and place sub-templates.
File: genealogy_filename/subtemplates/key_maps.py

Each map sends a placeholder name (including short aliases) to the field
key of a parsed record. Aliases share a field key; YY and YYYY differ only
in the formatting rule the engine applies to the placeholder name.
"""

from types import MappingProxyType


DATE_KEY_MAP = MappingProxyType({
    'YYYY': 'year',
    'YY': 'year',
    'MM': 'month',
    'M': 'month',
    'DD': 'day',
    'D': 'day',
})

NAME_KEY_MAP = MappingProxyType({
    'SURNAME': 'surname',
    'GIVEN': 'given',
    'MIDDLE': 'middle',
})

PLACE_KEY_MAP = MappingProxyType({
    'COUNTRY': 'country',
    'C': 'country',
    'STATE': 'state',
    'S': 'state',
    'COUNTY': 'county',
    'CO': 'county',
    'CITY': 'city',
    'CI': 'city',
})

# Union of the three, for rendering one template over a merged record
COMBINED_KEY_MAP = MappingProxyType({**DATE_KEY_MAP, **NAME_KEY_MAP, **PLACE_KEY_MAP})

# End of file #

"""Shared constants and configuration."""

# Console styling
CONSOLE_STYLES = {
    'success': 'green',
    'error': 'red',
    'warning': 'yellow',
    'info': 'cyan',
    'dim': 'dim'
}

# Parsers use this literal for any component they could not determine,
# and the engine substitutes it for absent fields.
MISSING_SENTINEL = 'x'

# Built-in sub-templates used when the caller supplies none
DEFAULT_DATE_TEMPLATE = '{YYYY}.{MM}.{DD}'
DEFAULT_NAME_TEMPLATE = '{SURNAME:upper}.{GIVEN}'
DEFAULT_PLACE_TEMPLATE = '{COUNTRY}.{STATE}.{COUNTY}.{CITY}'
DEFAULT_PEOPLE_TEMPLATE = '{GIVEN}.{SURNAME}|+'

# A bare place with no commas is read as a country only when it matches
# one of these (case-insensitive). Everything else is taken as a city.
KNOWN_COUNTRIES = frozenset({
    'usa', 'us', 'u.s.', 'u.s.a.', 'united states', 'united states of america',
    'america', 'canada', 'mexico',
    'uk', 'u.k.', 'united kingdom', 'great britain', 'britain',
    'england', 'scotland', 'wales', 'ireland', 'northern ireland',
    'france', 'germany', 'prussia', 'austria', 'switzerland', 'italy',
    'spain', 'portugal', 'netherlands', 'holland', 'belgium', 'luxembourg',
    'denmark', 'norway', 'sweden', 'finland', 'iceland',
    'poland', 'russia', 'ukraine', 'czech republic', 'bohemia', 'hungary',
    'greece', 'australia', 'new zealand', 'south africa',
})

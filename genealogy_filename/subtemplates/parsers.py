"""
Free-text parsers for genealogy date, name and place fields.
File: genealogy_filename/subtemplates/parsers.py

Each parser returns a record whose every field is a string, using the
sentinel "x" for anything it could not work out. Parsers never raise;
empty or unreadable input gives an all-sentinel record.
"""

from dataclasses import asdict, dataclass
from typing import Iterable, Optional

from genealogy_filename.constants import KNOWN_COUNTRIES, MISSING_SENTINEL
from genealogy_filename.subtemplates.subtemplate_regex_patterns import (
    ISO_DATE_RGX,
    PARTIAL_DATE_RGX,
    QUALIFIED_DATE_RGX,
    STANDALONE_YEAR_RGX,
    WHITESPACE_NORMALIZE_RGX
)


X = MISSING_SENTINEL


class _Components:
    """Sentinel-aware helpers shared by the component records."""

    def to_record(self) -> dict[str, Optional[str]]:
        """Field dict with the sentinel turned into None, ready for the engine."""
        return {key: (None if value == X else value) for key, value in asdict(self).items()}

    def missing_fields(self) -> list[str]:
        return [key for key, value in asdict(self).items() if value == X]


@dataclass(frozen=True)
class DateComponents(_Components):
    year: str = X
    month: str = X
    day: str = X


@dataclass(frozen=True)
class NameComponents(_Components):
    given: str = X
    middle: str = X
    surname: str = X


@dataclass(frozen=True)
class PlaceComponents(_Components):
    city: str = X
    county: str = X
    state: str = X
    country: str = X


def parse_date_input(date_string: Optional[str]) -> DateComponents:
    """
    Parse a genealogy date string into year, month and day.

    Supports, tried in order:
    - Full ISO date: "2024-03-05"
    - Partial dates: "2024-03", "2024"
    - Qualified dates: "Abt 1850", "Bef 1900-06", "Aft 1920-01-15"
      (the qualifier is dropped)
    - Any standalone four-digit year in other text

    Month and day ranges are not validated.
    """
    if not date_string or not date_string.strip():
        return DateComponents()

    trimmed = date_string.strip()

    if ISO_DATE_RGX.match(trimmed):
        year, month, day = trimmed.split('-')
        return DateComponents(year, month, day)

    match = PARTIAL_DATE_RGX.match(trimmed)
    if match:
        return DateComponents(match.group(1), match.group(2) or X, X)

    # Search rather than match: the year may sit anywhere in the text
    match = QUALIFIED_DATE_RGX.search(trimmed)
    if match:
        return DateComponents(match.group(2), match.group(3) or X, match.group(4) or X)

    match = STANDALONE_YEAR_RGX.search(trimmed)
    if match:
        return DateComponents(year=match.group(1))

    return DateComponents()


def parse_name_input(name_string: Optional[str]) -> NameComponents:
    """
    Parse a personal name into given, middle and surname.

    Examples:
        "John"                  -> given=John
        "John Smith"            -> given=John, surname=Smith
        "John Robert Smith"     -> given=John, middle=Robert, surname=Smith
        "Mary Ann Louise Smith" -> given=Mary, middle="Ann Louise", surname=Smith

    Hyphenated surnames ("Smith-Jones") stay in one piece.
    """
    if not name_string or not name_string.strip():
        return NameComponents()

    parts = [part for part in WHITESPACE_NORMALIZE_RGX.split(name_string.strip()) if part]

    if len(parts) == 1:
        return NameComponents(given=parts[0])
    elif len(parts) == 2:
        return NameComponents(given=parts[0], surname=parts[1])
    elif len(parts) == 3:
        return NameComponents(parts[0], parts[1], parts[2])
    elif len(parts) > 3:
        return NameComponents(parts[0], ' '.join(parts[1:-1]), parts[-1])

    return NameComponents()


def is_known_country(segment: str, known_countries: Optional[Iterable[str]] = None) -> bool:
    """Check a place segment against the known-country list, ignoring case."""
    countries = KNOWN_COUNTRIES if known_countries is None else {c.lower() for c in known_countries}
    return segment.strip().lower() in countries


def parse_place_input(place_string: Optional[str],
                      known_countries: Optional[Iterable[str]] = None) -> PlaceComponents:
    """
    Parse a comma-separated place into city, county, state and country.

    The last segment is always the country; the rest fill in backwards:
        "Cleveland, Cuyahoga, Ohio, USA" -> city, county, state, country
        "Cleveland, Ohio, USA"           -> city, state, country
        "London, England"                -> city, country
        "USA"                            -> country (known country name)
        "Boston"                         -> city

    With more than four segments the leading ones are joined back into
    the city, e.g. "Ward 3, Boston, Suffolk, Massachusetts, USA".

    Args:
        place_string: Raw place text
        known_countries: Names that make a single bare segment a country;
            defaults to KNOWN_COUNTRIES

    Returns:
        PlaceComponents with "x" for anything not present
    """
    if not place_string or not place_string.strip():
        return PlaceComponents()

    parts = [part.strip() for part in place_string.split(',')]
    parts = [part for part in parts if part]

    if len(parts) >= 4:
        return PlaceComponents(', '.join(parts[:-3]), parts[-3], parts[-2], parts[-1])
    elif len(parts) == 3:
        return PlaceComponents(city=parts[0], state=parts[1], country=parts[2])
    elif len(parts) == 2:
        return PlaceComponents(city=parts[0], country=parts[1])
    elif len(parts) == 1:
        if is_known_country(parts[0], known_countries):
            return PlaceComponents(country=parts[0])
        return PlaceComponents(city=parts[0])

    return PlaceComponents()


# End of file #

"""
Formatting of additional people (spouses, witnesses, parents) for filenames.
File: genealogy_filename/subtemplates/people_formatter.py

Each person goes through the NAME sub-template, is sanitized for filename
use, and the results are joined with a delimiter carried in the template
itself after the last "|":

    "{SURNAME:upper}.{GIVEN}|+"  ->  "DOE.Jane+SMITH.Robert"
"""

import json

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from genealogy_filename.constants import DEFAULT_PEOPLE_TEMPLATE
from genealogy_filename.diagnostics import Reporter
from genealogy_filename.subtemplates.sanitizer import sanitize_for_filename
from genealogy_filename.subtemplates.subtemplate_processor import process_name_subtemplate


class PeopleFileError(Exception):
    """Exception for unreadable or malformed people files."""
    pass


@dataclass(frozen=True)
class Person:
    given_name: str = ''
    middle_name: str = ''
    surname: str = ''
    relationship: str = ''   # carried along for callers; not used in formatting

    @classmethod
    def from_mapping(cls, data: Mapping) -> 'Person':
        """Build a Person from snake_case or form-style camelCase keys."""
        def pick(*keys):
            for key in keys:
                value = data.get(key)
                if value:
                    return str(value)
            return ''

        return cls(
            given_name=pick('given_name', 'givenName'),
            middle_name=pick('middle_name', 'middleName'),
            surname=pick('surname'),
            relationship=pick('relationship')
        )

    @property
    def full_name(self) -> str:
        """Non-blank name parts joined with single spaces."""
        parts = [self.given_name or '', self.middle_name or '', self.surname or '']
        return ' '.join(part for part in parts if part.strip())


PersonLike = Union[Person, Mapping]


def split_template_delimiter(template_with_delimiter: str) -> tuple[str, str]:
    """
    Split "template|delimiter" on the last pipe.

    Returns:
        Tuple of (format_template, delimiter); the delimiter is "" when the
        string has no pipe.
    """
    format_template, pipe, delimiter = template_with_delimiter.rpartition('|')
    if not pipe:
        return template_with_delimiter, ''
    return format_template, delimiter


def format_additional_people(people: Optional[list[PersonLike]],
                             template_with_delimiter: str = DEFAULT_PEOPLE_TEMPLATE,
                             reporter: Optional[Reporter] = None) -> str:
    """
    Format a list of people into one filename fragment.

    Args:
        people: Person objects or mappings with given/middle/surname
        template_with_delimiter: NAME sub-template, optionally followed by
            "|" and the delimiter to put between people
        reporter: Diagnostic callback passed through to the engine

    Returns:
        Joined, per-person sanitized names; "" for an empty or non-list input
    """
    if not people or not isinstance(people, (list, tuple)):
        return ''

    format_template, delimiter = split_template_delimiter(template_with_delimiter or '')

    formatted_people = []
    for entry in people:
        if isinstance(entry, Person):
            person = entry
        elif isinstance(entry, Mapping):
            person = Person.from_mapping(entry)
        else:
            # Unusable entries still occupy a slot, rendered with missing values
            person = Person()
        formatted = process_name_subtemplate(person.full_name, format_template, reporter)
        formatted_people.append(sanitize_for_filename(formatted))

    return delimiter.join(formatted_people)


def load_people_file(file_path: Path) -> list[Person]:
    """
    Load additional people from a JSON file holding a list of objects.

    Raises:
        PeopleFileError: If the file cannot be read or has the wrong shape
    """
    try:
        data = json.loads(Path(file_path).read_text(encoding='utf-8'))
    except OSError as e:
        raise PeopleFileError(f"Cannot read people file {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PeopleFileError(f"Invalid JSON in people file {file_path}: {e}") from e

    if not isinstance(data, list):
        raise PeopleFileError(f"People file {file_path} must contain a JSON list")

    people = []
    for index, item in enumerate(data, 1):
        if not isinstance(item, dict):
            raise PeopleFileError(f"Entry {index} in {file_path} is not an object")
        people.append(Person.from_mapping(item))

    return people


# End of file #

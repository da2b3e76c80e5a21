"""Command-line interface for genealogy filename sub-templates."""

import sys
import signal
import argparse

from pathlib import Path
from rich.console import Console

from genealogy_filename._version import __version__
from genealogy_filename.constants import (
    DEFAULT_DATE_TEMPLATE,
    DEFAULT_NAME_TEMPLATE,
    DEFAULT_PLACE_TEMPLATE,
    DEFAULT_PEOPLE_TEMPLATE
)
from genealogy_filename.diagnostics import DiagnosticCollector
from genealogy_filename.ui import display_results_table, display_preview_table, print_plain
from genealogy_filename.subtemplates import (
    TemplateEngine,
    Person,
    parse_date_input,
    parse_name_input,
    parse_place_input,
    process_date_subtemplate,
    process_name_subtemplate,
    process_place_subtemplate,
    format_additional_people,
    sanitize_for_filename
)
from genealogy_filename.subtemplates.key_maps import DATE_KEY_MAP, NAME_KEY_MAP, PLACE_KEY_MAP
from genealogy_filename.subtemplates.people_formatter import (
    PeopleFileError,
    load_people_file,
    split_template_delimiter
)


console = Console(stderr=True)


# field -> (parser, key map, default template, processor)
FIELD_HANDLERS = {
    'date': (parse_date_input, DATE_KEY_MAP, DEFAULT_DATE_TEMPLATE, process_date_subtemplate),
    'name': (parse_name_input, NAME_KEY_MAP, DEFAULT_NAME_TEMPLATE, process_name_subtemplate),
    'place': (parse_place_input, PLACE_KEY_MAP, DEFAULT_PLACE_TEMPLATE, process_place_subtemplate),
}


def setup_signal_handlers():
    """Setup graceful handling of Ctrl+C interruptions."""
    def signal_handler(sig, frame):
        console.print("\n[yellow]Operation interrupted by user[/yellow]")
        sys.exit(130)  # Standard exit code for Ctrl+C

    signal.signal(signal.SIGINT, signal_handler)


epilog_for_argparse = """
Placeholders:
    DATE:     {YYYY} {YY} {MM} {M} {DD} {D}
    NAME:     {SURNAME} {GIVEN} {MIDDLE}
    PLACE:    {COUNTRY} {C} {STATE} {S} {COUNTY} {CO} {CITY} {CI}

Modifiers (case-insensitive, last one in a chain wins):
    {SURNAME:upper}     SMITH
    {GIVEN:lower}       john
    {CITY:title}        New York
    {MIDDLE:abbrev}     R

Missing components are written as "x".

Examples:
    genealogy-filename --date "Abt 1850" --date-template "{YYYY}"
    genealogy-filename --name "John Robert Smith" --name-template "{SURNAME:upper}.{GIVEN}.{MIDDLE:abbrev}"
    genealogy-filename --place "Cleveland, Ohio, USA" --place-template "{COUNTRY}.{STATE}.{CITY}"
    genealogy-filename --person "Jane Doe" --person "Robert James Smith" --people-template "{SURNAME:upper}.{GIVEN}|+"
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genealogy-filename",
        description="Format genealogy dates, names and places with sub-templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_for_argparse
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}',
        help='Show program version and exit')

    fields = parser.add_argument_group('fields')
    fields.add_argument('--date', metavar='TEXT',
        help='Date text, e.g. "2024-03-05", "1900-06", "Bef 1900"')
    fields.add_argument('--date-template', metavar='TEMPLATE',
        help=f'DATE sub-template (default: {DEFAULT_DATE_TEMPLATE})')
    fields.add_argument('--name', metavar='TEXT',
        help='Name text, e.g. "John Robert Smith"')
    fields.add_argument('--name-template', metavar='TEMPLATE',
        help=f'NAME sub-template (default: {DEFAULT_NAME_TEMPLATE})')
    fields.add_argument('--place', metavar='TEXT',
        help='Place text, e.g. "Cleveland, Cuyahoga, Ohio, USA"')
    fields.add_argument('--place-template', metavar='TEMPLATE',
        help=f'PLACE sub-template (default: {DEFAULT_PLACE_TEMPLATE})')

    people = parser.add_argument_group('additional people')
    people.add_argument('--person', action='append', metavar='NAME', default=[],
        help='Additional person as "Given [Middle] Surname" (repeatable)')
    people.add_argument('--people-file', type=Path, metavar='FILE',
        help='JSON list of people with givenName/middleName/surname keys')
    people.add_argument('--people-template', metavar='TEMPLATE',
        help=f'NAME sub-template plus "|delimiter" (default: {DEFAULT_PEOPLE_TEMPLATE})')

    output = parser.add_argument_group('output options')
    output.add_argument('--sanitize', action='store_true',
        help='Replace whitespace with dashes in date/name/place output')
    output.add_argument('--plain', action='store_true',
        help='Print one result per line instead of a table')
    output.add_argument('--preview', action='store_true',
        help='Show how each placeholder was resolved')
    output.add_argument('--validate', action='store_true',
        help='Only check the supplied templates and report problems')
    output.add_argument('--quiet', action='store_true',
        help='Collect template warnings and show a summary at the end')

    return parser


def person_from_text(text: str) -> Person:
    """Turn "Given Middle Surname" into a Person using the name parser."""
    record = parse_name_input(text).to_record()
    return Person(
        given_name=record['given'] or '',
        middle_name=record['middle'] or '',
        surname=record['surname'] or ''
    )


def collect_people(args: argparse.Namespace) -> list[Person]:
    people = [person_from_text(text) for text in args.person]
    if args.people_file:
        people.extend(load_people_file(args.people_file))
    return people


def validate_templates(args: argparse.Namespace) -> list[str]:
    """Validate every supplied template, returning error messages."""
    errors = []

    for field, (_, key_map, _, _) in FIELD_HANDLERS.items():
        template = getattr(args, f'{field}_template')
        if template:
            is_valid, error = TemplateEngine(key_map).validate_template(template)
            if not is_valid:
                errors.append(f"--{field}-template: {error}")

    if args.people_template:
        format_template, _ = split_template_delimiter(args.people_template)
        is_valid, error = TemplateEngine(NAME_KEY_MAP).validate_template(format_template)
        if not is_valid:
            errors.append(f"--people-template: {error}")

    return errors


def main(argv: list[str] = None) -> int:
    """Main entry point. Returns the process exit status."""
    setup_signal_handlers()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.validate:
        errors = validate_templates(args)
        if errors:
            for error in errors:
                console.print(f"[red]Error: {error}[/red]", highlight=False, emoji=False)
            return 1
        console.print("[green]All templates are valid[/green]")
        return 0

    if not any([args.date is not None, args.name is not None, args.place is not None,
                args.person, args.people_file]):
        parser.print_usage(sys.stderr)
        console.print("[red]Error: Nothing to format (use --date, --name, --place, --person or --people-file)[/red]")
        return 1

    try:
        people = collect_people(args)
    except PeopleFileError as e:
        console.print(f"[red]Error: {e}[/red]", highlight=False, emoji=False)
        return 1

    reporter = DiagnosticCollector() if args.quiet else None
    results = []

    for field, (parser_func, key_map, default_template, processor) in FIELD_HANDLERS.items():
        raw_input = getattr(args, field)
        if raw_input is None:
            continue

        template = getattr(args, f'{field}_template')
        output = processor(raw_input, template, reporter)
        if args.sanitize:
            output = sanitize_for_filename(output)
        results.append((field, raw_input, template or default_template, output))

        if args.preview:
            engine = TemplateEngine(key_map, reporter=DiagnosticCollector())
            display_preview_table(field, engine.preview_substitution(
                template or default_template, parser_func(raw_input).to_record()
            ))

    if people:
        people_template = args.people_template or DEFAULT_PEOPLE_TEMPLATE
        output = format_additional_people(people, people_template, reporter)
        results.append(('people', '; '.join(p.full_name for p in people), people_template, output))

    if args.plain:
        for _, _, _, output in results:
            print_plain(output)
    else:
        display_results_table(results)

    if reporter is not None:
        reporter.show_summary()

    return 0


if __name__ == "__main__":
    sys.exit(main())

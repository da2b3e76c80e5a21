"""User interface components - result and preview displays."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from genealogy_filename.constants import CONSOLE_STYLES

console = Console()


def display_results_table(results: list[tuple[str, str, str, str]], title: str = "Formatted Fields"):
    """Display formatted fields as (field, input, template, output) rows."""
    table = Table(title=title)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Input", style="magenta")
    table.add_column("Template", style="dim")
    table.add_column("Output", style="green")

    for field, raw_input, template, output in results:
        # Text() keeps user brackets from being read as rich markup
        table.add_row(field, Text(raw_input or ''), Text(template or ''), Text(output))

    console.print(table)


def display_preview_table(field: str, preview: dict):
    """Display the per-placeholder breakdown of one template substitution."""
    table = Table(title=Text(f"{field.capitalize()} template: {preview['template']}"))
    table.add_column("Token", style="cyan", no_wrap=True)
    table.add_column("Field", style="magenta")
    table.add_column("Value")
    table.add_column("Modifier", style="dim")
    table.add_column("Result", style="green")

    for sub in preview['substitutions']:
        if not sub['recognized']:
            value = Text("unknown placeholder", style=CONSOLE_STYLES['warning'])
        elif sub['used_missing_value']:
            value = Text("missing", style=CONSOLE_STYLES['dim'])
        else:
            value = Text(sub['found_value'])

        table.add_row(
            Text(sub['token']),
            sub['field'] or '-',
            value,
            sub['modifier'] or '-',
            Text(sub['final_value'])
        )

    console.print(table)
    console.print(Text(f"Result: {preview['result']}"))


def print_plain(value: str):
    """Print a value as-is, with no markup or highlighting."""
    console.print(value, markup=False, highlight=False, emoji=False, soft_wrap=True)

"""
Diagnostic reporting for sub-template processing.
File: genealogy_filename/diagnostics.py

Unknown placeholders and unknown modifiers never stop formatting. They are
reported through a side channel: by default a yellow warning on stderr,
or any callable the caller passes as `reporter`.
"""

from typing import Callable, Optional
from rich.console import Console

from genealogy_filename.constants import CONSOLE_STYLES


console = Console(stderr=True)

Reporter = Callable[[str], None]


def report_diagnostic(message: str) -> None:
    """Print a diagnostic warning to stderr."""
    style = CONSOLE_STYLES['warning']
    console.print(f"[{style}]Warning: {message}[/{style}]", highlight=False, emoji=False)


def resolve_reporter(reporter: Optional[Reporter]) -> Reporter:
    """Return the reporter to use, falling back to the console."""
    return reporter if reporter is not None else report_diagnostic


class DiagnosticCollector:
    """
    Reporter that records diagnostics instead of printing them.

    Pass an instance anywhere a `reporter` is accepted, then inspect
    `messages` or call `show_summary()` once formatting is done.
    """

    def __init__(self):
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def show_summary(self):
        """Print collected diagnostics, de-duplicated in first-seen order."""
        if not self.messages:
            return

        unique = list(dict.fromkeys(self.messages))
        style = CONSOLE_STYLES['warning']
        console.print(f"\n[{style}]Template warnings ({len(self.messages)}):[/{style}]")
        for message in unique:
            count = self.messages.count(message)
            suffix = f" (x{count})" if count > 1 else ""
            console.print(f"  ⚠ {message}{suffix}", markup=False, highlight=False, emoji=False)


# End of file #

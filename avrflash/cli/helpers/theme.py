"""Rich theme and console for avrflash terminal output."""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class Colors:
    """Color palette for terminal output."""

    PROGRESS = "bold green"
    WARNING = "bold yellow"
    ERROR = "bold red"


AVRFLASH_THEME = Theme(
    {
        "progress": Colors.PROGRESS,
        "warning": Colors.WARNING,
        "error": Colors.ERROR,
    }
)

# Width of the right-aligned progress label, as cargo prints "   Compiling"
PROGRESS_LABEL_WIDTH = 12


class ThemedConsole:
    """Console wrapper printing cargo-style status lines to stderr.

    Message text is never parsed as Rich markup, so paths and tool output
    containing brackets are shown verbatim.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(
            theme=AVRFLASH_THEME, stderr=True, soft_wrap=True, highlight=False
        )

    def print_progress(self, label: str, message: str) -> None:
        """Print e.g. `    Flashing target/avr-none/release/blink.elf`."""
        self.console.print(
            Text.assemble(
                (label.rjust(PROGRESS_LABEL_WIDTH), "progress"), " ", message
            )
        )

    def print_warning(self, message: str) -> None:
        self.console.print(Text.assemble(("warning", "warning"), ": ", message))

    def print_error(self, message: str) -> None:
        self.console.print(Text.assemble(("error", "error"), ": ", message))


def get_themed_console(console: Console | None = None) -> ThemedConsole:
    """Get a themed console writing to stderr."""
    return ThemedConsole(console=console)

import contextlib
from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.status import Status

START_SYMBOL = "[cyan]→[/cyan]"
SUCCESS_SYMBOL = "[green]✔[/green]"
FAILURE_SYMBOL = "[red]✘[/red]"


@contextlib.contextmanager
def progress_indicator(console: Console, text: str, spinner: bool = True) -> Iterator[Optional[Status]]:
    """
    Show a spinner with `text` while the block runs, then persist a
    success or failure line. Exceptions are re-raised unchanged.

    With ``spinner=False`` a plain start line is printed instead, for blocks
    that hand the terminal to a child process.
    """
    status = None
    if spinner:
        status = console.status(escape(text), spinner="dots")
        status.start()
    else:
        console.print(f"{START_SYMBOL} {escape(text)}")
    try:
        yield status
    except Exception:
        if status is not None:
            status.stop()
        console.print(f"{FAILURE_SYMBOL} {escape(text)}")
        raise
    if status is not None:
        status.stop()
    console.print(f"{SUCCESS_SYMBOL} {escape(text)}")

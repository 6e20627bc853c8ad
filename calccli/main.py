#!/usr/bin/env python3
"""
calc CLI - left-to-right calculator

Main entrypoint for the calc command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from calcbrain.config import Settings
from calcbrain.core.operations import OPERATIONS, kind_name
from calcbrain.logging_config import setup_logging
from calccli.commands import evaluate, repl
from calccli.tokens import ALIASES

app = typer.Typer(
    name="calc",
    help="Left-to-right calculator evaluation engine",
    add_completion=False,
)

console = Console()

app.command("eval")(evaluate.eval_command)
app.command("replay")(evaluate.replay_command)
app.command("repl")(repl.repl_command)


@app.callback()
def main_callback():
    """Configure logging from CALCBRAIN_* environment variables."""
    setup_logging(Settings.from_env())


@app.command()
def operations():
    """List recognized operation symbols."""
    aliases = {}
    for alias, symbol in ALIASES.items():
        aliases.setdefault(symbol, []).append(alias)

    table = Table(title="Operations")
    table.add_column("Symbol", style="green")
    table.add_column("Kind", style="cyan")
    table.add_column("Aliases", style="dim")

    for symbol, operation in OPERATIONS.items():
        table.add_row(symbol, kind_name(operation), " ".join(aliases.get(symbol, [])))

    console.print(table)


@app.command()
def version():
    """Show version information."""
    from calccli import __version__
    from calcbrain import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]calc CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"calcbrain v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()

"""
Interactive calculator session.
"""

from typing import Dict, List

import typer
from rich.console import Console
from rich.markup import escape

from calcbrain import CalculatorBrain
from calcbrain.config import Settings
from calccli.tokens import apply_token, format_description, format_result, parse_assignment

console = Console()

QUIT_TOKENS = ("quit", "exit")


def _show(brain: CalculatorBrain, variables: Dict[str, float]) -> None:
    evaluation = brain.evaluate(variables)
    console.print(
        f"[cyan]{format_result(evaluation.result)}[/cyan]  "
        f"[yellow]{escape(format_description(evaluation))}[/yellow]"
    )


def repl_command(
    var: List[str] = typer.Option([], "--var", "-v", help="Initial variable value as NAME=VALUE"),
):
    """
    Start an interactive session.

    Enter whitespace-separated tokens per line. NAME=VALUE stores a variable
    value (like the memory key), undo removes the last input, clear resets,
    quit ends the session after applying the tokens before it on its line.
    """
    variables: Dict[str, float] = {}
    for item in var:
        try:
            name, value = parse_assignment(item)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--var")
        variables[name] = value

    settings = Settings.from_env()
    brain = CalculatorBrain(description_digits=settings.description_digits)

    while True:
        try:
            line = console.input("[bold]calc>[/bold] ")
        except EOFError:
            break

        tokens = line.split()
        quitting = False
        for i, token in enumerate(tokens):
            if token in QUIT_TOKENS:
                tokens, quitting = tokens[:i], True
                break

        for token in tokens:
            if "=" in token and token != "=":
                try:
                    name, value = parse_assignment(token)
                except ValueError as e:
                    console.print(f"[red]Error:[/red] {escape(str(e))}")
                    continue
                variables[name] = value
                continue
            apply_token(brain, token)

        if tokens:
            _show(brain, variables)
        if quitting:
            break

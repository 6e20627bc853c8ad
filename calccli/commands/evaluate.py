"""
Evaluate commands: eval tokens, replay a saved program
"""

import json
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calcbrain import CalculatorBrain, EvaluationResult
from calcbrain.config import Settings
from calcbrain.core import CalcBrainError, InvalidEventError, canonical_json_str
from calcbrain.log import Program
from calccli.tokens import apply_tokens, format_description, format_result, parse_assignments

console = Console()


def _variables_option(var: List[str]) -> Dict[str, float]:
    try:
        return parse_assignments(var)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--var")


def _render(brain: CalculatorBrain, evaluation: EvaluationResult, variables: Dict[str, float], json_output: bool) -> None:
    if json_output:
        output = {
            "evaluation": evaluation,
            "variables": variables,
            "program": brain.program_records(),
        }
        print(canonical_json_str(output, indent=2))
        return

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Result[/bold]", f"[cyan]{format_result(evaluation.result)}[/cyan]")
    table.add_row("[bold]Pending[/bold]", "yes" if evaluation.is_pending else "no")
    table.add_row("[bold]Description[/bold]", f"[yellow]{escape(format_description(evaluation))}[/yellow]")
    console.print(table)


def eval_command(
    tokens: List[str] = typer.Argument(
        ...,
        help="Inputs: numbers, $NAME variables, operation symbols, undo, clear. Put -- before negative numbers.",
    ),
    var: List[str] = typer.Option([], "--var", "-v", help="Variable value as NAME=VALUE (repeatable)"),
    until: Optional[int] = typer.Option(None, "--until", "-u", min=0, help="Evaluate only the first N inputs"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Evaluate a sequence of calculator inputs left to right.

    Examples:
        calc eval 4 + 5 =
        calc eval 9 sqrt
        calc eval '$M' x 2 = --var M=7
        calc eval 2 x 3 + 1 = --json
    """
    variables = _variables_option(var)
    settings = Settings.from_env()

    try:
        brain = CalculatorBrain(description_digits=settings.description_digits)
        apply_tokens(brain, tokens)
        evaluation = brain.evaluate(variables, to_index=until)
    except CalcBrainError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    _render(brain, evaluation, variables, json_output)


def replay_command(
    program_path: str = typer.Argument(..., help="JSON file written by 'calc eval --json'"),
    var: List[str] = typer.Option([], "--var", "-v", help="Variable value as NAME=VALUE (repeatable)"),
    until: Optional[int] = typer.Option(None, "--until", "-u", min=0, help="Evaluate only the first N inputs"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Re-evaluate a program saved as JSON.

    Accepts either the full 'calc eval --json' output or a bare list of
    program records. Saved variables are used unless overridden with --var.

    Examples:
        calc replay program.json
        calc replay program.json --var M=3 --until 2
    """
    overrides = _variables_option(var)

    try:
        with open(program_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        variables: Dict[str, float] = {}
        records = data
        if isinstance(data, dict):
            records = data.get("program", [])
            saved = data.get("variables") or {}
            if not isinstance(saved, dict):
                raise InvalidEventError("variables must be an object")
            for name, value in saved.items():
                variables[name] = float(value)
        if not isinstance(records, list):
            raise InvalidEventError("Program must be a list of event records")
        variables.update(overrides)

        settings = Settings.from_env()
        brain = CalculatorBrain(description_digits=settings.description_digits)
        brain.load_program(Program.from_records(records))
        evaluation = brain.evaluate(variables, to_index=until)
    except FileNotFoundError:
        console.print(f"[red]Error: Program file not found:[/red] {escape(program_path)}")
        raise typer.Exit(2)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Program file is not valid JSON:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Error: Invalid saved variables:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    except CalcBrainError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    _render(brain, evaluation, variables, json_output)

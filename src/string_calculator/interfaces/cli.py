"""CLI interface implementation using Typer."""

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from string_calculator.calculator import StringCalculator
from string_calculator.errors import CalculatorError
from string_calculator.models.io import CalculationResult, WelcomeMessage
from string_calculator.types import AdditionVariant

from .base import BaseInterface

# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False, highlight=False)

DEMO_INPUTS: tuple[tuple[AdditionVariant, str], ...] = (
    (AdditionVariant.V1, "1,2"),
    (AdditionVariant.V2, "1,2,3"),
    (AdditionVariant.V3, "1\n2,3"),
    (AdditionVariant.V4, "//;\n1;2;3"),
    (AdditionVariant.V5, "//;\n1;2;-3"),
)


def unescape_line_breaks(text: str) -> str:
    """Turn literal ``\\n`` sequences typed on a shell into line breaks."""
    return text.replace("\\n", "\n")


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self, calculator: StringCalculator | None = None) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        self.calculator = calculator or StringCalculator()
        self.app = typer.Typer(
            name="string-calculator",
            help="Sum numbers embedded in delimited strings.",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        self.app.command(name="add")(self.add)
        self.app.command(name="demo")(self.demo)

        # Show welcome when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:  # pragma: no cover
        """Run when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def add(
        self,
        text: Annotated[
            str,
            typer.Argument(
                help="Numbers to add. Use '\\n' for a line break, e.g. '//#\\n1#2'.",
            ),
        ],
        variant: Annotated[
            AdditionVariant,
            typer.Option(
                "--variant",
                "-v",
                case_sensitive=False,
                help="Parsing rule to apply.",
            ),
        ] = AdditionVariant.V5,
        json_output: Annotated[
            bool,
            typer.Option(
                "--json",
                help="Render the result as JSON.",
            ),
        ] = False,
    ) -> None:
        """Add the numbers in TEXT using the selected variant."""
        raw = unescape_line_breaks(text)
        self.logger.info("Running calculation", variant=variant.value, text=raw)

        try:
            total = self.calculator.add(raw, variant)
        except CalculatorError as exc:
            self.logger.error(
                "Calculation failed",
                variant=variant.value,
                kind=exc.kind.value,
                error=str(exc),
            )
            console.print(f"[red]{exc.kind.value}: {escape(str(exc))}[/red]")
            console.file.flush()
            raise typer.Exit(1) from exc

        if json_output:
            result = CalculationResult(
                variant=variant,
                text=raw,
                total=total,
                invocation_count=self.calculator.read_invocation_count(),
            )
            console.print_json(result.model_dump_json(), highlight=False)
            console.file.flush()
            return

        console.print(str(total))
        console.file.flush()

    def demo(self) -> None:
        """Run every variant against a sample input."""
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Variant", style="bold")
        table.add_column("Input")
        table.add_column("Result")

        for variant, text in DEMO_INPUTS:
            try:
                outcome = str(self.calculator.add(text, variant))
            except CalculatorError as exc:
                self.logger.warning(
                    "Demo input rejected",
                    variant=variant.value,
                    kind=exc.kind.value,
                )
                outcome = f"[red]Error: {escape(str(exc))}[/red]"
            table.add_row(variant.value.upper(), escape(repr(text)), outcome)

        console.print(table)
        console.print(
            f"Invocation count: {self.calculator.read_invocation_count()}",
        )
        console.file.flush()

    def run(self) -> None:
        """Run the CLI interface."""
        self.app()

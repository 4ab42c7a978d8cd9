"""Console reporter: AugmentedModel → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from archmeta.application.augmentation.engine import AugmentedModel
    from archmeta.application.augmentation.views import ClassView, ParameterView


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        color: Emit ANSI styles. False gives plain text.
        show_parameters: Render the parameter table of each service.
    """

    width: int = 120
    color: bool = True
    show_parameters: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    One section per class carrying service capabilities. Output is str,
    not print(). Caller decides destination.

    Reading the accessors evaluates them: an unresolvable parameter type
    raises MissingCollaboratorError out of report().
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, augmented: AugmentedModel) -> str:
        """Format service metadata of an augmented model.

        Args:
            augmented: Result of AugmentationEngine.apply

        Returns:
            Formatted string with tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        services = augmented.with_capability("allowExternalAccess")
        self._render_header(console, augmented, services)

        for service in services:
            self._render_service(console, service)
            if self._config.show_parameters:
                self._render_parameters(console, service.parameter_views)

        return output.getvalue()

    def _render_header(
        self,
        console: Console,
        augmented: AugmentedModel,
        services: tuple[ClassView, ...],
    ) -> None:
        """Render header with model summary."""
        console.print()
        console.rule(Text(f"MODEL {augmented.model.name}", style="bold"))
        console.print()
        console.print(
            f"[bold]Classes:[/bold] {len(augmented.iter_classes())}  "
            f"[bold]Services:[/bold] {len(services)}"
        )
        console.print()

    def _render_service(self, console: Console, service: ClassView) -> None:
        """Render the class-level capabilities of one service."""
        table = Table(show_header=False, box=None, title=Text(str(service.class_), style="bold"))
        table.add_column("Property", style="cyan")
        table.add_column("Value")

        access = "yes" if service.allowExternalAccess else "no"
        table.add_row("External access", Text(access, style="green" if access == "yes" else "red"))
        table.add_row("Dependent services", Text(_names(service.dependentServices)))
        table.add_row("Dependent DAOs", Text(_names(service.dependentDaos)))

        console.print(table)
        console.print()

    def _render_parameters(self, console: Console, parameters: tuple[ParameterView, ...]) -> None:
        """Render validation rule and mock value of each parameter."""
        if not parameters:
            return

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Operation", style="cyan")
        table.add_column("Parameter")
        table.add_column("Type", style="yellow")
        table.add_column("Validation")
        table.add_column("Mock", style="dim")

        for view in parameters:
            table.add_row(
                Text(view.operation.name),
                Text(view.parameter.name),
                Text(view.parameter.type.name),
                Text(view.joiDefinition),
                Text(view.mockValue),
            )

        console.print(table)
        console.print()


def _names(views: tuple[ClassView, ...]) -> str:
    if not views:
        return "-"
    return ", ".join(view.class_.name for view in views)

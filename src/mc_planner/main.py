"""CLI entrypoint for MC Planner."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import print

from mc_planner.cli import CliPlanHandler
from mc_planner.config import settings
from mc_planner.planning import classify
from mc_planner.registry import JsonInventorySource, JsonRuleRegistry, RegistryLoadError
from mc_planner.telemetry.logging import configure_logging

app = typer.Typer(help="MC Planner: turn a crafting goal into an ordered step plan")


def _build_handler(rules_file: str | None, inventory_file: str | None) -> CliPlanHandler:
    rules = rules_file or settings.rules_path
    if not rules:
        raise typer.BadParameter("Provide --rules or set MC_PLANNER_RULES_PATH")
    inventory = inventory_file or settings.inventory_path

    configure_logging(settings.log_level)
    try:
        return CliPlanHandler.from_sources(
            JsonRuleRegistry(Path(rules), native_namespace=settings.native_namespace),
            JsonInventorySource(Path(inventory) if inventory else None, namespace=settings.native_namespace),
        )
    except RegistryLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "max_depth": settings.max_depth,
            "native_namespace": settings.native_namespace,
            "long_task_threshold": settings.long_task_threshold,
            "rules_path": settings.rules_path,
            "inventory_path": settings.inventory_path,
        }
    )


@app.command()
def plan(
    target: str,
    count: int = typer.Option(1, min=1, help="How many to produce"),
    rules: str = typer.Option(None, help="Path to the rule registry JSON export"),
    inventory: str = typer.Option(None, help="Path to an inventory snapshot JSON"),
    tool_tier: int = typer.Option(-1, help="Best pickaxe tier held (-1 none, 0 wood ... 4 netherite)"),
    has_furnace: bool = typer.Option(False, help="A furnace is already placed nearby"),
) -> None:
    """Resolve TARGET and print the ordered steps, continuation directive and warnings."""
    handler = _build_handler(rules, inventory)
    report = handler.plan(target, count, tool_tier=tool_tier, has_furnace=has_furnace)
    print(handler.format_report(report))


@app.command()
def tree(
    target: str,
    count: int = typer.Option(1, min=1, help="How many to produce"),
    rules: str = typer.Option(None, help="Path to the rule registry JSON export"),
    inventory: str = typer.Option(None, help="Path to an inventory snapshot JSON"),
) -> None:
    """Print the dependency tree for TARGET."""
    handler = _build_handler(rules, inventory)
    typer.echo(handler.tree(target, count))


@app.command("classify")
def classify_resources(resources: list[str]) -> None:
    """Show how each resource is acquired when no rule is involved."""
    print({resource: classify(resource).value for resource in resources})


@app.command()
def diagnose(
    rules: str = typer.Option(None, help="Path to the rule registry JSON export"),
    target: str = typer.Option(None, help="Diagnose a single item instead of every output"),
) -> None:
    """Plan every known output from scratch and report the ones that cannot be automated."""
    handler = _build_handler(rules, None)
    report = handler.diagnose(target)
    print(handler.format_diagnostic(report))
    if report.impossible:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

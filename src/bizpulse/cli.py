"""
BizPulse CLI — command-line interface.

Usage:
    bizpulse analyze company.yaml
    bizpulse analyze company.json --output report.json
    bizpulse analyze company.yaml --tactics
    bizpulse advise company.yaml --config bizpulse.yaml
    bizpulse benchmarks
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from bizpulse import __version__

app = typer.Typer(
    name="bizpulse",
    help="📈 BizPulse — business maturity assessment for small and medium companies",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]BizPulse[/bold] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log engine details",
    ),
) -> None:
    """📈 BizPulse — Score. Diagnose. Recommend."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command()
def analyze(
    company_file: str = typer.Argument(..., help="Company survey answers (.yaml or .json)"),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Save the report (.md, .json)",
    ),
    tactics: bool = typer.Option(
        False,
        "--tactics",
        help="Add the tactical playbook and a detailed 12-week plan",
    ),
) -> None:
    """Score a company and print its maturity summary."""
    from bizpulse.engine import analyze_company

    company = _load_company(company_file)

    console.print(Panel.fit(
        f"[bold blue]📈 BizPulse[/bold blue] — {company.company or 'Unnamed company'}",
        subtitle=f"v{__version__}",
    ))

    result = analyze_company(company, tactics=tactics)
    _display_result(result)
    if output:
        _save_result(result, output)


@app.command()
def advise(
    company_file: str = typer.Argument(..., help="Company survey answers (.yaml or .json)"),
    config: str = typer.Option(
        "bizpulse.yaml",
        "--config",
        "-c",
        help="Path to config file",
    ),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Save the AI narrative (.md)",
    ),
) -> None:
    """Analyze a company and ask the AI advisor for a narrative report."""
    from bizpulse.advisor import AIAdvisor
    from bizpulse.config import BizPulseConfig
    from bizpulse.engine import analyze_company

    settings = BizPulseConfig.load(config if Path(config).exists() else None)
    if not settings.has_api_key:
        console.print(
            "[red]Error: No API key configured.[/red]\n"
            "Set BIZPULSE_API_KEY, OPENAI_API_KEY or ANTHROPIC_API_KEY."
        )
        raise typer.Exit(1)

    company = _load_company(company_file)
    result = analyze_company(company)

    with console.status("[bold green]Asking the AI advisor...[/bold green]"):
        response = asyncio.run(AIAdvisor(settings).narrate(company, result))

    if not response.success:
        console.print(f"[red]{response.recommendation}[/red] [dim]({response.error})[/dim]")
        raise typer.Exit(1)

    console.print(Markdown(response.recommendation))
    if output:
        Path(output).write_text(response.recommendation, encoding="utf-8")
        console.print(f"[green]✓[/green] Narrative saved to [bold]{output}[/bold]")


@app.command()
def benchmarks() -> None:
    """List the sector benchmark table."""
    from bizpulse.benchmarks import all_benchmarks

    table = Table(title="Sector Benchmarks")
    table.add_column("Key", style="bold cyan")
    table.add_column("Margin %", justify="right")
    table.add_column("Ticket (R$)", justify="right")
    table.add_column("Conversion %", justify="right")
    table.add_column("NPS", justify="right")
    table.add_column("Turnover %", justify="right")
    table.add_column("Cycle (days)", justify="right")
    table.add_column("Delinquency %", justify="right")

    for key, bench in all_benchmarks().items():
        table.add_row(
            key,
            f"{bench.average_margin:g}",
            f"{bench.average_ticket:,.0f}",
            f"{bench.average_conversion_rate:g}",
            f"{bench.reference_nps:g}",
            f"{bench.average_turnover:g}",
            f"{bench.average_sales_cycle_days:g}",
            f"{bench.average_delinquency:g}",
        )

    console.print(table)


def _load_company(path_str: str):  # noqa: ANN202
    """Read a YAML/JSON company file into a CompanyRecord, exiting on failure."""
    from bizpulse.models.company import CompanyRecord

    path = Path(path_str)
    if not path.exists():
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)

    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        console.print(f"[red]Error: Could not parse {path}: {exc}[/red]")
        raise typer.Exit(1) from exc

    if not isinstance(data, dict):
        console.print(f"[red]Error: {path} must contain a mapping of survey answers[/red]")
        raise typer.Exit(1)

    try:
        return CompanyRecord.model_validate(data)
    except ValidationError as exc:
        console.print(f"[red]Error: Invalid company data in {path}:[/red]\n{exc}")
        raise typer.Exit(1) from exc


def _display_result(result) -> None:  # noqa: ANN001
    """Display the analysis summary in the terminal."""
    from bizpulse.models.analysis import Priority

    console.print()

    table = Table(title="Maturity Scores", show_lines=True)
    table.add_column("Dimension", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Status")

    diagnoses = result.diagnoses
    for dimension, score in result.scores.by_dimension().items():
        table.add_row(dimension.value.title(), f"{score}/100", diagnoses[dimension].status.value)
    table.add_row("[bold]Overall[/bold]", f"[bold]{result.scores.overall}/100[/bold]", "")
    table.add_row("Benchmark", result.benchmark.sector, "")

    console.print(table)
    console.print()

    priority_colors = {
        Priority.HIGH: "red",
        Priority.MEDIUM: "yellow",
        Priority.LOW: "green",
    }
    for heading, items in (
        ("Priority Recommendations", result.recommendations),
        ("Tactical Playbook", result.tactics),
    ):
        if not items:
            continue
        console.print(f"[bold]{heading}:[/bold]")
        for rec in items:
            color = priority_colors[rec.priority]
            console.print(
                f"  {rec.id}. [{color}]\\[{rec.priority.value.upper()}][/{color}] "
                f"{rec.title} — {rec.timeframe}"
            )
        console.print()


def _save_result(result, output: str) -> None:  # noqa: ANN001
    """Save the result to file."""
    path = Path(output)
    if path.suffix == ".json":
        content = result.to_json()
    else:
        content = result.to_markdown()

    path.write_text(content, encoding="utf-8")
    console.print(f"[green]✓[/green] Report saved to [bold]{path}[/bold]")


if __name__ == "__main__":
    app()

"""
resume-ats Command Line Interface

Parse resume files, score them and export the structured record.
"""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="resume-ats",
    help="Heuristic resume parser and ATS scorer",
    add_completion=False,
)
console = Console()


class ExportFormat(str, Enum):
    """Output formats for the parse command."""

    JSON = "json"
    TEXT = "text"
    XML = "xml"
    ENHANCED = "enhanced"
    CSV = "csv"
    CSV_PREVIEW = "csv-preview"


def _load(path: Path):
    """Extract and parse ``path``, exiting with a message on input errors."""
    from resume_ats.nlp import (
        EmptyResumeTextError,
        TextExtractionError,
        UnsupportedFileTypeError,
        get_resume_parser,
    )

    if not path.exists():
        console.print(f"[red]Error: Path does not exist: {path}[/red]")
        raise typer.Exit(1)

    try:
        return asyncio.run(get_resume_parser().parse_file_async(path))
    except (EmptyResumeTextError, UnsupportedFileTypeError, TextExtractionError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level")):
    """Configure logging before any command runs."""
    from resume_ats.utils.logger import setup_logging

    setup_logging(level="DEBUG" if verbose else None)


@app.command()
def version():
    """Show application version."""
    from resume_ats import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from resume_ats.nlp import ExtractorFactory
    from resume_ats.utils.config import get_settings

    settings = get_settings()

    table = Table(title="resume-ats Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Log Level", settings.logging.level)
    table.add_row("Max File Size", f"{settings.extraction.max_file_size_bytes:,} bytes")
    table.add_row("Supported Formats", ", ".join(ExtractorFactory.get_supported_extensions()))
    table.add_row("Escape XML Values", str(settings.export.xml_escape_values))

    console.print(table)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="Resume file (.pdf, .docx or .txt)"),
    output_format: ExportFormat = typer.Option(ExportFormat.JSON, "--format", "-f", help="Output format"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
):
    """Parse a resume and print it in the chosen format."""
    from resume_ats.core.export import (
        export_as_ats_plain_text,
        export_as_ats_xml,
        export_as_csv,
        export_as_csv_preview,
        export_as_enhanced_json,
    )
    from resume_ats.utils.config import get_settings

    result = _load(path)
    resume = result.resume
    name = path.stem

    if output_format is ExportFormat.JSON:
        content = resume.to_json(indent=get_settings().export.json_indent)
    elif output_format is ExportFormat.TEXT:
        content = export_as_ats_plain_text(resume, name)
    elif output_format is ExportFormat.XML:
        content = export_as_ats_xml(resume, name)
    elif output_format is ExportFormat.ENHANCED:
        content = export_as_enhanced_json(resume, name).to_json()
    elif output_format is ExportFormat.CSV:
        content = export_as_csv(resume)
    else:
        content = export_as_csv_preview(resume)

    if output:
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {output_format.value} export to [cyan]{output}[/cyan]")
    else:
        # Plain print keeps rich from interpreting brackets in resume text
        print(content)

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


@app.command()
def score(
    path: Path = typer.Argument(..., help="Resume file (.pdf, .docx or .txt)"),
    advanced: bool = typer.Option(False, "--advanced", "-a", help="Show the weighted ATS breakdown"),
):
    """Show the confidence score and, optionally, the advanced ATS score."""
    from resume_ats.core.scoring import calculate_advanced_score

    result = _load(path)
    console.print(f"Confidence score: [bold cyan]{result.confidence_score}[/bold cyan]/100")

    if not advanced:
        return

    breakdown = calculate_advanced_score(result.resume)
    table = Table(title=f"ATS Score: {breakdown.overall_score}/100")
    table.add_column("Category", style="cyan")
    table.add_column("Sub-score", style="dim")
    table.add_column("Points", justify="right", style="green")

    for name, category in breakdown.categories:
        label = name.replace("_", " ").title()
        table.add_row(label, "", f"{category.score:g}/{category.max_score}")
        for detail, points in category.details.items():
            table.add_row("", detail, f"{points:g}")

    console.print(table)


if __name__ == "__main__":
    app()

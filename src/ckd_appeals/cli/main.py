"""CLI for ckd-appeals: extract / analyze / kb / serve commands."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ckd_appeals.api.app import build_decision_engine, build_knowledge_base
from ckd_appeals.core.config import AppSettings
from ckd_appeals.exceptions import AppealsError
from ckd_appeals.extraction import expand_terms, extract_clinical_data
from ckd_appeals.ingestion import ExtractedDocument, extract_document_text
from ckd_appeals.ingestion.documents import PDF_CONTENT_TYPE, TEXT_CONTENT_TYPE
from ckd_appeals.models import ClinicalData, Decision

app = typer.Typer(name="ckd-appeals", help="Clinical extraction and appeal decisions for CKD claims")
console = Console()

_OUTCOME_STYLES = {"APPROVE": "green", "REJECT": "red", "REVIEW": "yellow"}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def _read_document(path: Path, settings: AppSettings) -> ExtractedDocument:
    content_type = PDF_CONTENT_TYPE if path.suffix.lower() == ".pdf" else TEXT_CONTENT_TYPE
    try:
        return extract_document_text(
            path.read_bytes(),
            content_type,
            path.name,
            max_bytes=settings.upload.max_bytes,
            allowed_content_types=settings.upload.allowed_content_types,
        )
    except AppealsError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


def _clinical_table(data: ClinicalData) -> Table:
    table = Table(title="Clinical Data")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for name, value in data.to_dict().items():
        if name == "complications":
            value = ", ".join(c["name"] for c in value) or None
        table.add_row(name, "-" if value is None else str(value))
    return table


def _print_decision(decision: Decision) -> None:
    style = _OUTCOME_STYLES.get(decision.outcome.value, "white")
    console.print(
        f"\n[bold {style}]{decision.outcome.value}[/bold {style}] "
        f"confidence={decision.confidence:.2f} source={decision.source.value} model={decision.model}"
    )
    if decision.error:
        console.print(f"[dim]Model error: {decision.error}[/dim]")
    for heading, lines in (
        ("Rationale", decision.rationale),
        ("Key factors", decision.key_factors),
        ("Recommendations", decision.recommendations),
    ):
        if lines:
            console.print(f"\n[bold]{heading}:[/bold]")
            for line in lines:
                console.print(f"  - {line}")


@app.command()
def extract(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="PDF or text document"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Extract clinical values and abbreviations from a document."""
    _configure_logging(verbose)
    settings = AppSettings()
    kb = build_knowledge_base(settings).get()

    document = _read_document(file, settings)
    expansion = expand_terms(document.text, kb.abbreviations)
    clinical = extract_clinical_data(document.text, kb.complication_descriptions())

    if as_json:
        payload = {"clinical_data": clinical.to_dict(), "expanded_data": expansion.to_dict()}
        typer.echo(json.dumps(payload, indent=2))
        return

    console.print(_clinical_table(clinical))

    table = Table(title="Abbreviations")
    table.add_column("Abbreviation", style="cyan")
    table.add_column("Full name", style="green")
    for item in expansion.expansions:
        table.add_row(item.abbreviation, item.full_name)
    console.print(table)


@app.command()
def analyze(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="PDF or text document"),
    offline: bool = typer.Option(False, "--offline", help="Skip the model and use the fallback rules"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Extract clinical values and produce an appeal decision."""
    _configure_logging(verbose)
    settings = AppSettings()
    if offline:
        settings.llm.enabled = False

    kb = build_knowledge_base(settings).get()
    engine = build_decision_engine(settings)

    document = _read_document(file, settings)
    clinical = extract_clinical_data(document.text, kb.complication_descriptions())
    console.print(_clinical_table(clinical))

    decision = asyncio.run(engine.decide(clinical, document.text))
    _print_decision(decision)


@app.command()
def kb(
    path: Optional[Path] = typer.Option(None, "--path", help="Knowledge-base JSON file"),
) -> None:
    """Show knowledge-base table counts."""
    settings = AppSettings()
    if path:
        settings.knowledge_base.path = path

    cache = build_knowledge_base(settings)
    knowledge = cache.get()
    if not cache.is_loaded:
        console.print(f"[red]Could not load knowledge base from {settings.knowledge_base.path}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Knowledge Base ({settings.knowledge_base.path.name})")
    table.add_column("Section", style="cyan")
    table.add_column("Table", style="green")
    table.add_column("Entries", justify="right")
    for section, counts in knowledge.summary().items():
        for name, count in counts.items():
            table.add_row(section, name, str(count))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Port (defaults to CKD_API_PORT)"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = AppSettings()
    uvicorn.run("ckd_appeals.api.app:app", host=host, port=port or settings.api.port, reload=reload)


if __name__ == "__main__":
    app()

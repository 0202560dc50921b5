"""CLI entry point for CV Craft."""

import asyncio
import logging
import time
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> cv_craft/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from pydantic import ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.panel import Panel  # noqa: E402

from cv_craft.config import Settings, get_settings  # noqa: E402
from cv_craft.exceptions import CVCraftError  # noqa: E402
from cv_craft.models.cv import CVContent  # noqa: E402
from cv_craft.models.export import ExportResult  # noqa: E402
from cv_craft.models.theme import ThemeConfig  # noqa: E402
from cv_craft.pdf.browser import BrowserManager  # noqa: E402
from cv_craft.pdf.exporter import PDFExporter  # noqa: E402
from cv_craft.rendering.document import (  # noqa: E402
    build_export_documents,
    build_preview_document,
)

app = typer.Typer(
    name="cv-craft",
    help="CV Craft - two-column PDF export for CVs",
    add_completion=False,
)
console = Console()


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    """Route library logging to stderr at the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def read_file(path: Path) -> str:
    """Read file content as text."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def load_inputs(cv: Path, theme: Path | None) -> tuple[CVContent, ThemeConfig]:
    """Parse the CV and theme JSON files, exiting on invalid input."""
    try:
        content = CVContent.from_json(read_file(cv))
        config = ThemeConfig.from_json(read_file(theme)) if theme else ThemeConfig()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid input: {e}")
        raise typer.Exit(1) from e
    return content, config


async def run_export(
    settings: Settings,
    content: CVContent,
    config: ThemeConfig,
    output: Path | None,
    photo_asset: str | None,
) -> ExportResult:
    async with BrowserManager(settings) as browser:
        exporter = PDFExporter(browser, settings)
        return await exporter.export(content, config, output, photo_asset_id=photo_asset)


@app.command()
def export(
    cv: Annotated[Path, typer.Argument(help="Path to the parsed CV content (JSON)")],
    theme: Annotated[
        Path | None, typer.Option("--theme", "-t", help="Path to a theme configuration (JSON)")
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output PDF path (default: exports directory)"),
    ] = None,
    photo_asset: Annotated[
        str | None, typer.Option("--photo-asset", help="Photo asset id in asset storage")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed progress")
    ] = False,
) -> None:
    """Export a CV to a two-column PDF."""
    settings = get_settings()
    configure_logging(settings, verbose)
    console.print(
        Panel.fit(
            "[bold blue]CV Craft[/bold blue] - Exporting your CV",
            border_style="blue",
        )
    )

    content, config = load_inputs(cv, theme)

    if verbose:
        console.print(f"[dim]CV:[/dim] {cv}")
        console.print(f"[dim]Theme:[/dim] {theme or 'default'}")
        console.print(f"[dim]Photo:[/dim] {photo_asset or 'none'}")
        console.print()

    start_time = time.time()
    try:
        result = asyncio.run(run_export(settings, content, config, output, photo_asset))
    except CVCraftError as e:
        console.print(f"\n[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    console.print(f"[green]PDF saved to:[/green] {result.filepath}")
    console.print(
        f"[dim]{result.page_count} page(s), {result.byte_size:,} bytes, "
        f"{time.time() - start_time:.1f}s[/dim]"
    )


@app.command()
def preview(
    cv: Annotated[Path, typer.Argument(help="Path to the parsed CV content (JSON)")],
    theme: Annotated[
        Path | None, typer.Option("--theme", "-t", help="Path to a theme configuration (JSON)")
    ] = None,
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Directory for the HTML documents")
    ] = Path("preview"),
) -> None:
    """Write the export and preview HTML documents without launching a browser."""
    configure_logging(get_settings())
    content, config = load_inputs(cv, theme)

    documents = build_export_documents(content, config)
    files = {
        "sidebar.html": documents.sidebar,
        "main.html": documents.main,
        "background.html": documents.background,
        "preview.html": build_preview_document(content, config),
    }

    output.mkdir(parents=True, exist_ok=True)
    for name, html in files.items():
        (output / name).write_text(html, encoding="utf-8")
        console.print(f"[green]Wrote[/green] {output / name}")


@app.command()
def version() -> None:
    """Show version information."""
    from cv_craft import __version__

    console.print(f"CV Craft v{__version__}")


if __name__ == "__main__":
    app()

"""CLI interface for video insights."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analyzer.exceptions import ConfigurationError, RemoteError, StorageError
from .config import settings
from .formatting import SECTIONS, format_section
from .logger import configure_logging
from .service import InvalidApiKeyError, VideoInsightsService
from .storage.database import DatabasePreferenceStore

app = typer.Typer(help="Video Insights - Video summaries powered by Gemini AI")
console = Console()


def get_service() -> VideoInsightsService:
    """Create the service over the persistent preference store."""
    return VideoInsightsService(DatabasePreferenceStore())


def _open_service() -> VideoInsightsService:
    try:
        return get_service()
    except StorageError as e:
        console.print(f"[red]Storage error: {e}[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    configure_logging("DEBUG" if verbose else None)


@app.command()
def key(
    api_key: str = typer.Argument(..., help="Gemini API key"),
):
    """Save the Gemini API key locally."""
    service = _open_service()
    try:
        service.set_key(api_key)
    except InvalidApiKeyError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except StorageError as e:
        console.print(f"[red]Failed to save API key: {e}[/red]")
        raise typer.Exit(1)

    console.print("[green]Saved[/green]")
    console.print("[dim]Your API key is stored locally and only sent to the Gemini API.[/dim]")


@app.command()
def model(
    model_id: Optional[str] = typer.Argument(None, help="Model ID to select"),
):
    """Show or change the Gemini model used for analysis."""
    service = _open_service()

    if model_id is None:
        try:
            console.print(service.get_model())
        except StorageError as e:
            console.print(f"[red]Storage error: {e}[/red]")
            raise typer.Exit(1)
        return

    try:
        service.set_model(model_id)
        selected = service.get_model()
    except StorageError as e:
        console.print(f"[red]Failed to save model: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"Selected model: [cyan]{selected}[/cyan]")


@app.command("models")
def list_models():
    """List the Gemini models available to your API key."""
    service = _open_service()

    try:
        with console.status("Loading available models..."):
            catalog = service.fetch_model_catalog()
        selected = service.get_model()
    except (ConfigurationError, StorageError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Gemini Models")
    table.add_column("", style="cyan", width=1)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Description")

    for m in catalog:
        table.add_row("*" if m.id == selected else "", m.id, m.name, m.description)

    console.print(table)

    if catalog.is_fallback:
        console.print(f"[yellow]Could not load models from the API ({catalog.error}); showing defaults.[/yellow]")
    if catalog.find(selected) is None:
        console.print(f"[yellow]Selected model '{selected}' is not in this list.[/yellow]")


@app.command()
def analyze(
    source: str = typer.Argument(..., help="Video file path or URL"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help=f"Print one section as plain text: {', '.join(SECTIONS)}"
    ),
):
    """Analyze a video with the selected Gemini model."""
    if section is not None and section not in SECTIONS:
        console.print(f"[red]Unknown section: {section}. Choose from {', '.join(SECTIONS)}[/red]")
        raise typer.Exit(1)

    service = _open_service()

    try:
        with console.status(f"Analyzing with {service.get_model()}..."):
            outcome = service.request_analysis(source)
    except (ConfigurationError, RemoteError, StorageError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    result = outcome.result

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    if section is not None:
        typer.echo(format_section(result, section))
        return

    if outcome.degraded:
        console.print("[yellow]The model reply was not valid JSON; showing diagnostic output.[/yellow]")

    console.print(Panel(result.summary, title="Summary", border_style="cyan"))

    console.print("\n[bold cyan]Key Points:[/bold cyan]")
    for i, point in enumerate(result.key_points, 1):
        console.print(f"  {i}. {point}")

    console.print(f"\n[bold cyan]Sentiment:[/bold cyan] {result.sentiment}")
    console.print("[bold cyan]Topics:[/bold cyan] " + ", ".join(result.topics))


@app.command()
def config():
    """Show current configuration."""
    service = _open_service()

    try:
        masked_key = service.masked_key()
        selected = service.get_model()
    except StorageError as e:
        console.print(f"[red]Storage error: {e}[/red]")
        raise typer.Exit(1)

    console.print("\n[bold]Current Configuration[/bold]")
    console.print(f"Gemini API Key: {masked_key}")
    console.print(f"Selected Model: {selected}")
    console.print(f"Models Endpoint: {settings.models_endpoint}")
    console.print(f"Database: {settings.database_path}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind"),
):
    """Start the API server."""
    import uvicorn

    console.print(f"Starting server at http://{host}:{port}")
    uvicorn.run("video_insights.api.routes:app", host=host, port=port)


if __name__ == "__main__":
    app()

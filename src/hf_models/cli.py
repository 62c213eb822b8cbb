# src/hf_models/cli.py
"""
CLI module for hf-models.

Provides command-line interface using Click and Rich.

Commands:
    hfm list-models  - List models from the Hub
    hfm info         - Show a model's detail record
    hfm quants       - List GGUF quantizations available for a model
    hfm config       - Manage configuration
"""

import json
import logging
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .client import HubClient, HubError
from .config import ConfigManager
from .core import get_client
from .formatters import (
    NO_MODELS_MESSAGE,
    build_details_view,
    build_models_table,
    details_to_dict,
    format_json,
)
from .models import ListModelsOptions
from .quants import QuantExtractor, extract_quants_from_siblings

console = Console()
err_console = Console(stderr=True)


def get_config() -> ConfigManager:
    """Get or create the config manager singleton."""
    return ConfigManager()


def _open_client(token: Optional[str]) -> HubClient:
    return get_client(token or "")


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    raise SystemExit(1)


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="hf-models")
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Log HTTP requests to stderr"
)
def main(verbose: bool):
    """
    🤗 hf-models - Query the Hugging Face Hub model catalog.

    List models, inspect model details, and see which GGUF
    quantizations a repository ships.

    \b
    Quick Start:
      hfm list-models --search qwen --limit 5
      hfm info unsloth/Qwen3-8B-GGUF
      hfm quants unsloth/Qwen3-8B-GGUF --min-quant q4
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ============================================================
# List Command
# ============================================================

@main.command("list-models")
@click.option("--search", default="", help="Search for models with this string in their id")
@click.option("--filter", "filter_", default="", help="Filter models by library, task, or tags")
@click.option("--author", default="", help="Filter models by author (username or organization)")
@click.option("--pipeline-tag", default="", help="Filter models by pipeline tag (e.g., 'text-generation')")
@click.option("--library-name", default="", help="Filter models by library (e.g., 'pytorch', 'gguf')")
@click.option("--language", default="", help="Filter models by language (e.g., 'en', 'fr')")
@click.option("--tag", default="", help="Filter models by specific tag")
@click.option("--limit", "-n", type=int, default=None, help="Maximum number of models to return [default: 20]")
@click.option("--sort", default="", help="Sort results by field (e.g., 'downloads', 'likes', 'trending_score')")
@click.option(
    "--direction",
    type=click.IntRange(-1, 1),
    default=0,
    help="Sort direction: -1 for descending, 1 for ascending"
)
@click.option(
    "--output-format", "-f",
    type=click.Choice(["table", "json"]),
    default=None,
    help="Output format [default: table]"
)
@click.option("--token", default=None, help="Hugging Face API token (or set HF_TOKEN)")
def list_models(search: str, filter_: str, author: str, pipeline_tag: str,
                library_name: str, language: str, tag: str, limit: Optional[int],
                sort: str, direction: int, output_format: Optional[str], token: Optional[str]):
    """
    List models from the Hugging Face Hub.

    \b
    Examples:
      hfm list-models --search bert
      hfm list-models --author google --limit 10
      hfm list-models --pipeline-tag text-generation --sort downloads
      hfm list-models --search bert -f json
    """
    cfg = get_config()
    options = ListModelsOptions(
        search=search,
        filter=filter_,
        author=author,
        pipeline_tag=pipeline_tag,
        library_name=library_name,
        language=language,
        tag=tag,
        limit=limit if limit is not None else cfg.default_limit,
        sort=sort,
        direction=direction,
    )
    output_format = output_format or cfg.output_format

    try:
        with _open_client(token) as client:
            models = client.list_models(options)
    except HubError as e:
        _fail(f"failed to list models: {e}")

    if output_format == "json":
        click.echo(format_json(models))
    elif not models:
        console.print(f"[yellow]{NO_MODELS_MESSAGE}[/yellow]")
    else:
        console.print(build_models_table(models))


# ============================================================
# Info Command
# ============================================================

@main.command()
@click.argument("model_id")
@click.option(
    "--output-format", "-f",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format"
)
@click.option("--token", default=None, help="Hugging Face API token (or set HF_TOKEN)")
def info(model_id: str, output_format: str, token: Optional[str]):
    """
    Show detailed information about a model.

    \b
    Examples:
      hfm info bartowski/Meta-Llama-3-8B-Instruct-GGUF
      hfm info google/gemma-2b-it -f json
    """
    try:
        with _open_client(token) as client:
            details = client.get_model_details(model_id)
    except HubError as e:
        _fail(f"failed to fetch model details: {e}")

    quants = extract_quants_from_siblings(details.siblings)

    if output_format == "json":
        click.echo(json.dumps(details_to_dict(details, quants), indent=2, ensure_ascii=False))
    else:
        console.print(build_details_view(details, quants))


# ============================================================
# Quants Command
# ============================================================

@main.command()
@click.argument("model_id")
@click.option(
    "--min-quant", "-q",
    type=str,
    default=None,
    help="Minimum quantization level (e.g., q4 for 'Q4 or above')"
)
@click.option(
    "--output-format", "-f",
    type=click.Choice(["table", "json", "simple"]),
    default="table",
    help="Output format"
)
@click.option("--token", default=None, help="Hugging Face API token (or set HF_TOKEN)")
def quants(model_id: str, min_quant: Optional[str], output_format: str, token: Optional[str]):
    """
    List the GGUF quantizations available for a model.

    \b
    Examples:
      hfm quants unsloth/Qwen3-8B-GGUF
      hfm quants unsloth/Qwen3-8B-GGUF --min-quant q5
      hfm quants unsloth/Qwen3-8B-GGUF -f simple
    """
    try:
        with _open_client(token) as client:
            found = client.get_available_quants(model_id)
    except HubError as e:
        _fail(f"failed to fetch quantizations: {e}")

    found = QuantExtractor.filter_quants(found, min_quant)

    if output_format == "json":
        click.echo(json.dumps(found))
        return

    if output_format == "simple":
        for quant in found:
            click.echo(quant)
        return

    if not found:
        suffix = f" at {min_quant.upper()} or above" if min_quant else ""
        console.print(f"[yellow]No GGUF quantizations found for {escape(model_id)}{suffix}.[/yellow]")
        return

    table = Table(title=f"🔢 {model_id}")
    table.add_column("#", style="dim", width=4)
    table.add_column("Quantization", style="cyan")
    table.add_column("Precision", style="yellow", justify="right")

    for i, quant in enumerate(found, 1):
        score = QuantExtractor.get_quant_score(quant)
        table.add_row(str(i), quant, str(score) if score else "?")

    console.print(table)


# ============================================================
# Config Command
# ============================================================

@main.group()
def config():
    """Manage hf-models configuration."""
    pass


@config.command("show")
def config_show():
    """Show current configuration."""
    cfg = get_config()

    token = cfg.get_token()
    masked = f"{token[:4]}…{token[-4:]}" if len(token) > 8 else ("set" if token else "(not set)")

    console.print(f"[bold cyan]API URL:[/bold cyan] {cfg.get_api_url()}")
    console.print(f"[bold cyan]Token:[/bold cyan] {masked}")
    console.print(f"[bold cyan]Default Limit:[/bold cyan] {cfg.default_limit}")
    console.print(f"[bold cyan]Output Format:[/bold cyan] {cfg.output_format}")
    console.print(f"\n[bold cyan]Config File:[/bold cyan] {cfg.config_file_path}")


@config.command("set-token")
@click.argument("token")
def config_set_token(token: str):
    """Store a Hugging Face API token."""
    cfg = get_config()
    cfg.set_token(token)
    console.print("[green]✓ Token saved[/green]")


@config.command("set-url")
@click.argument("url")
def config_set_url(url: str):
    """Set the catalog API base URL."""
    cfg = get_config()
    cfg.set_api_url(url)
    console.print(f"[green]✓ API URL set to:[/green] {cfg.get_api_url()}")


@config.command("reset")
@click.confirmation_option(prompt="Reset all configuration?")
def config_reset():
    """Reset configuration to defaults."""
    cfg = get_config()
    cfg.reset()
    console.print("[green]✓ Configuration reset to defaults[/green]")


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    main()

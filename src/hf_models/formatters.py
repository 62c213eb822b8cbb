"""
Rendering of catalog results.

Tables are built with Rich and can be printed directly or rendered to plain
text for library callers. JSON output uses the Hub field names.
"""

import io
import json
from typing import Iterable, List, Sequence

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Model, ModelDetails
from .utils import format_date, format_number, format_params, or_na


NO_MODELS_MESSAGE = "No models found matching the specified criteria."
OUTPUT_FORMATS = ("table", "json")

# Wide enough that ids and dates are never wrapped in plain-text output
RENDER_WIDTH = 200


def build_models_table(models: Sequence[Model]) -> Table:
    """
    Build a Rich table of model summaries.

    Args:
        models: Models to show

    Returns:
        Rich Table with one row per model
    """
    table = Table(title=f"📦 Models ({len(models)} shown)")
    table.add_column("Model ID", style="cyan", no_wrap=True)
    table.add_column("Author", style="green", no_wrap=True)
    table.add_column("Downloads", style="yellow", justify="right")
    table.add_column("Likes", style="yellow", justify="right")
    table.add_column("Last Modified", style="dim")
    table.add_column("Library", style="magenta")
    table.add_column("Task", style="blue")

    for model in models:
        table.add_row(
            model.id,
            model.author,
            format_number(model.downloads),
            format_number(model.likes),
            format_date(model.last_modified),
            or_na(model.library_name),
            or_na(model.pipeline_tag),
        )

    return table


def render_text(renderable: RenderableType) -> str:
    """Render a Rich object to plain text (no colors)."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=RENDER_WIDTH, color_system=None, force_terminal=False)
    console.print(renderable)
    return buffer.getvalue().rstrip("\n")


def format_table(models: Sequence[Model]) -> str:
    """
    Format models as a plain-text table.

    Returns:
        The table, or a "no models" message for an empty list
    """
    if not models:
        return NO_MODELS_MESSAGE
    return render_text(build_models_table(models))


def format_json(models: Iterable[Model]) -> str:
    """
    Format models as an indented JSON array ("[]" when empty).

    Keys for unset optional fields, lastModified included, are omitted.
    """
    data = [m.to_dict() for m in models]
    if not data:
        return "[]"
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_models(models: Sequence[Model], output_format: str = "table") -> str:
    """
    Format models in the requested output format.

    Args:
        models: Models to format
        output_format: "table" or "json"

    Raises:
        ValueError: Unsupported output format
    """
    if output_format == "json":
        return format_json(models)
    if output_format == "table":
        return format_table(models)
    raise ValueError(f"unsupported output format: {output_format} (use 'table' or 'json')")


def details_to_dict(details: ModelDetails, quants: List[str]) -> dict:
    """Detail record as a JSON-ready dict, with the extracted quantizations."""
    data = details.to_dict()
    data["quants"] = list(quants)
    return data


def build_details_view(details: ModelDetails, quants: List[str]) -> RenderableType:
    """
    Build a Rich view of a model's detail record.

    Args:
        details: Detail record
        quants: Quantizations extracted from its file listing

    Returns:
        Renderable group (header panel plus field table)
    """
    card = details.card_data

    fields = Table(show_header=False, box=None)
    fields.add_column("Field", style="bold", width=16)
    fields.add_column("Value")

    fields.add_row("Author", or_na(details.author))
    fields.add_row("Downloads", format_number(details.downloads))
    fields.add_row("Likes", format_number(details.likes))
    fields.add_row("Last Modified", format_date(details.last_modified))
    fields.add_row("Library", or_na(details.library_name))
    fields.add_row("Task", or_na(details.pipeline_tag))
    fields.add_row("Base Model", or_na(card.get_base_model()))
    fields.add_row("License", or_na(card.get_license()))
    if card.quantized_by:
        fields.add_row("Quantized By", card.quantized_by)
    if details.gguf:
        fields.add_row("Architecture", or_na(details.gguf.architecture))
        fields.add_row("Context Length", format_number(details.gguf.context_length))
        fields.add_row("Parameters", format_params(details.gguf.total))
    fields.add_row("Files", str(len(details.siblings)))
    fields.add_row("Quantizations", ", ".join(quants) if quants else Text("none", style="dim"))

    return Group(
        Panel.fit(f"📦 {details.id}", style="bold cyan"),
        fields,
    )

"""
Library entry points for hf-models.

Convenience functions that create a HubClient from the configuration,
run one request, and close the client again.
"""

from typing import List, Optional

from .client import HubClient
from .config import get_config
from .formatters import OUTPUT_FORMATS, format_models
from .models import ListModelsOptions, ModelDetails


def get_client(token: str = "") -> HubClient:
    """
    Create a HubClient from the global configuration.

    Args:
        token: Explicit token; falls back to HF_TOKEN / the config file

    Returns:
        A new HubClient (caller closes it)
    """
    config = get_config()
    return HubClient(token=token or config.get_token(), base_url=config.get_api_url())


def list_models(options: Optional[ListModelsOptions] = None, output_format: str = "table") -> str:
    """
    List models and return them formatted as text.

    Args:
        options: Filter/sort criteria
        output_format: "table" or "json"

    Returns:
        Formatted output

    Raises:
        ValueError: Unsupported output format
        HubError: The catalog request failed
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"unsupported output format: {output_format}")

    options = options or ListModelsOptions()
    with get_client(options.token) as client:
        models = client.list_models(options)
    return format_models(models, output_format)


def get_model_details(model_id: str, token: str = "") -> ModelDetails:
    """Fetch the detail record of a model."""
    with get_client(token) as client:
        return client.get_model_details(model_id)


def get_available_quants(model_id: str, token: str = "") -> List[str]:
    """
    Return the GGUF quantizations available for a model.

    Example:
        >>> get_available_quants("unsloth/Qwen3-8B-GGUF")
        ['Q4_K_M', 'Q8_0', 'BF16', ...]
    """
    with get_client(token) as client:
        return client.get_available_quants(model_id)

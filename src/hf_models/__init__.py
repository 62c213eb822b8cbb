"""
hf-models - A client library and CLI for the Hugging Face Hub model catalog.

This package provides:
- Catalog queries: list models by filter/sort criteria, fetch model details
- Quantization extraction: recover GGUF quant labels (Q4_K_M, IQ4_NL, BF16,
  UD-TQ1_0, ...) from a repository's file listing
- Rendering: Rich tables and JSON output

Architecture:
- Client Layer: HubClient over httpx
- Parsing Layer: QuantExtractor pattern table (pure, no I/O)
- Interface Layer: CLI (hfm) and library functions
"""

__version__ = "0.1.0"

# Configuration
from .config import ConfigManager, get_config

# Data model
from .models import (
    CardData,
    GGUFInfo,
    ListModelsOptions,
    Model,
    ModelDetails,
    Multiple,
    OneOrMany,
    Sibling,
    Single,
)

# Quantization extraction
from .quants import QuantExtractor, extract_quants, extract_quants_from_siblings

# Client
from .client import HubAPIError, HubClient, HubError, HubRequestError, HubResponseError

# Library functions
from .core import get_available_quants, get_model_details, list_models

# Formatting
from .formatters import format_json, format_models, format_table

__all__ = [
    # Config
    "ConfigManager",
    "get_config",
    # Models
    "CardData",
    "GGUFInfo",
    "ListModelsOptions",
    "Model",
    "ModelDetails",
    "Multiple",
    "OneOrMany",
    "Sibling",
    "Single",
    # Quants
    "QuantExtractor",
    "extract_quants",
    "extract_quants_from_siblings",
    # Client
    "HubClient",
    "HubError",
    "HubAPIError",
    "HubRequestError",
    "HubResponseError",
    # Library
    "list_models",
    "get_model_details",
    "get_available_quants",
    # Formatting
    "format_json",
    "format_models",
    "format_table",
    # Version
    "__version__",
]

"""
Tests for the formatters and utils modules.
"""

import json
from datetime import datetime

import pytest

from hf_models.formatters import (
    NO_MODELS_MESSAGE,
    build_details_view,
    details_to_dict,
    format_json,
    format_models,
    format_table,
    render_text,
)
from hf_models.models import Model, ModelDetails
from hf_models.utils import format_date, format_number, format_params, or_na


class TestUtils:
    """Tests for formatting helpers."""

    def test_format_number(self):
        assert format_number(0) == "0"
        assert format_number(999) == "999"
        assert format_number(1000) == "1,000"
        assert format_number(1234567) == "1,234,567"

    def test_format_date(self):
        assert format_date(datetime(2024, 3, 1, 10, 0)) == "2024-03-01"
        assert format_date(None) == "N/A"

    def test_or_na(self):
        assert or_na("") == "N/A"
        assert or_na("transformers") == "transformers"

    def test_format_params(self):
        assert format_params(500) == "500"
        assert format_params(350_000_000) == "350.0M"
        assert format_params(8_190_735_360) == "8.2B"


class TestTable:
    """Tests for table output."""

    def test_empty(self):
        assert format_table([]) == NO_MODELS_MESSAGE

    def test_rows(self, model_list):
        models = [Model.from_dict(m) for m in model_list]
        output = format_table(models)

        for header in ("Model ID", "Author", "Downloads", "Likes", "Last Modified", "Library", "Task"):
            assert header in output
        assert "google/gemma-2b-it" in output
        assert "1,234,567" in output
        assert "2024-03-01" in output
        assert "text-generation" in output
        # gpt2 has no date, library or task
        gpt2_line = next(line for line in output.splitlines() if "gpt2" in line)
        assert gpt2_line.count("N/A") == 3


class TestJSON:
    """Tests for JSON output."""

    def test_empty(self):
        assert format_json([]) == "[]"

    def test_models(self, model_list):
        models = [Model.from_dict(m) for m in model_list]
        data = json.loads(format_json(models))

        assert [m["id"] for m in data] == ["google/gemma-2b-it", "gpt2"]
        assert data[0]["author"] == "google"
        assert data[0]["library_name"] == "transformers"


class TestFormatModels:
    """Tests for output format dispatch."""

    def test_dispatch(self, model_list):
        models = [Model.from_dict(m) for m in model_list]
        assert format_models(models, "json") == format_json(models)
        assert format_models(models, "table") == format_table(models)

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="unsupported output format"):
            format_models([], "yaml")


class TestDetails:
    """Tests for the detail view."""

    def test_details_view(self, gguf_details):
        details = ModelDetails.from_dict(gguf_details)
        output = render_text(build_details_view(details, ["Q4_K_M", "BF16"]))

        assert "unsloth/Qwen3-8B-GGUF" in output
        assert "Qwen/Qwen3-8B" in output
        assert "apache-2.0" in output
        assert "qwen3" in output
        assert "40,960" in output
        assert "Q4_K_M, BF16" in output

    def test_details_view_without_quants(self):
        details = ModelDetails.from_dict({"id": "gpt2"})
        output = render_text(build_details_view(details, []))

        assert "gpt2" in output
        assert "none" in output

    def test_details_to_dict(self, gguf_details):
        details = ModelDetails.from_dict(gguf_details)
        data = details_to_dict(details, ["Q4_K_M"])

        assert data["quants"] == ["Q4_K_M"]
        assert data["id"] == "unsloth/Qwen3-8B-GGUF"

"""
Shared fixtures.

Every test gets a fresh ConfigManager backed by a temporary config file,
and HF_TOKEN is cleared so the developer's environment does not leak in.
"""

import json

import httpx
import pytest

from hf_models import config as config_module
from hf_models.client import HubClient
from hf_models.config import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at tmp_path and reset the singleton."""
    config_file = tmp_path / "hf_models" / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.delenv("HF_TOKEN", raising=False)
    monkeypatch.setattr(ConfigManager, "_instance", None)
    yield config_file
    ConfigManager._instance = None


class FakeHub:
    """
    Minimal stand-in for the Hub API, served through httpx.MockTransport.

    Routes map a URL path to (status, payload). Every request is recorded.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, payload, status=200):
        self.routes[path] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, text="Repository not found")
        status, payload = self.routes[request.url.path]
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, content=json.dumps(payload).encode("utf-8"),
                              headers={"Content-Type": "application/json"})

    def client(self, token=""):
        return HubClient(
            token=token,
            base_url="https://hub.test/api/models",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def fake_hub():
    return FakeHub()


MODEL_LIST = [
    {
        "id": "google/gemma-2b-it",
        "downloads": 1234567,
        "likes": 890,
        "lastModified": "2024-03-01T10:20:30.000Z",
        "library_name": "transformers",
        "pipeline_tag": "text-generation",
        "private": False,
        "gated": "manual",
        "trendingScore": 12,
    },
    {
        "id": "gpt2",
        "downloads": 42,
        "likes": 7,
        "private": False,
        "gated": False,
    },
]

GGUF_DETAILS = {
    "id": "unsloth/Qwen3-8B-GGUF",
    "author": "unsloth",
    "downloads": 50000,
    "likes": 120,
    "lastModified": "2025-05-02T08:00:00.000Z",
    "pipeline_tag": "text-generation",
    "library_name": "transformers",
    "tags": ["gguf", "qwen3"],
    "siblings": [
        {"rfilename": ".gitattributes"},
        {"rfilename": "README.md"},
        {"rfilename": "Qwen3-8B-Q4_K_M.gguf"},
        {"rfilename": "Qwen3-8B-Q8_0.gguf"},
        {"rfilename": "Qwen3-8B-UD-TQ1_0.gguf"},
        {"rfilename": "Qwen3-8B-IQ4_NL.gguf"},
        {"rfilename": "BF16/Qwen3-8B-BF16-00001-of-00002.gguf"},
        {"rfilename": "BF16/Qwen3-8B-BF16-00002-of-00002.gguf"},
    ],
    "cardData": {
        "base_model": ["Qwen/Qwen3-8B", "Qwen/Qwen3-8B-Base"],
        "license": "apache-2.0",
        "quantized_by": "unsloth",
    },
    "gguf": {"total": 8190735360, "architecture": "qwen3", "context_length": 40960},
}


@pytest.fixture
def model_list():
    return json.loads(json.dumps(MODEL_LIST))


@pytest.fixture
def gguf_details():
    return json.loads(json.dumps(GGUF_DETAILS))

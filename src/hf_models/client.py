"""
Hugging Face Hub catalog client.

Thin synchronous wrapper over the Hub model API:
- list models with filter/sort criteria
- fetch a model's detail record (including its file listing)
- derive the GGUF quantizations available in a repository

Every failure surfaces as a HubError subclass.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import DEFAULT_API_URL
from .models import ListModelsOptions, Model, ModelDetails
from .quants import extract_quants_from_siblings


LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HubError(Exception):
    """Base class for catalog service failures."""
    pass


class HubRequestError(HubError):
    """Raised when the request could not be sent or no response arrived."""
    pass


class HubAPIError(HubError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}")


class HubResponseError(HubError):
    """Raised when the response body is not the expected JSON."""
    pass


class HubClient:
    """
    Client for the Hugging Face Hub model catalog.

    Example:
        >>> with HubClient(token="hf_xxx") as client:
        ...     models = client.list_models(ListModelsOptions(search="bert", limit=5))
        ...     quants = client.get_available_quants("unsloth/Qwen3-8B-GGUF")
    """

    def __init__(
        self,
        token: str = "",
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: Bearer token sent with every request (optional)
            base_url: Model listing endpoint
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self) -> "HubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def _headers(self, token: str) -> Dict[str, str]:
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def _get_json(self, url: str, params: Optional[Dict[str, str]] = None, token: str = "") -> Any:
        """
        Issue a GET request and decode the JSON body.

        Raises:
            HubRequestError: Transport failure
            HubAPIError: Non-200 status
            HubResponseError: Body is not valid JSON
        """
        LOGGER.debug("GET %s params=%s", url, params or {})
        try:
            response = self._http.get(url, params=params, headers=self._headers(token))
        except httpx.HTTPError as exc:
            raise HubRequestError(f"failed to execute request: {exc}") from exc

        LOGGER.debug("%s -> %d", url, response.status_code)
        if response.status_code != 200:
            raise HubAPIError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise HubResponseError(f"failed to parse response: {exc}") from exc

    def list_models(self, options: Optional[ListModelsOptions] = None) -> List[Model]:
        """
        List models matching the given criteria.

        Args:
            options: Filters and sorting; ``options.token`` overrides the client token

        Returns:
            Model summaries in the order the service returned them
        """
        options = options or ListModelsOptions()
        token = options.token or self.token
        payload = self._get_json(self.base_url, params=options.to_params(), token=token)

        if not isinstance(payload, list):
            raise HubResponseError(f"failed to parse response: expected a list, got {type(payload).__name__}")

        return [Model.from_dict(item) for item in payload if isinstance(item, dict)]

    def get_model_details(self, model_id: str) -> ModelDetails:
        """
        Fetch the detail record of one model.

        Args:
            model_id: Repository id (e.g. "unsloth/Qwen3-8B-GGUF")

        Returns:
            ModelDetails including the file listing
        """
        payload = self._get_json(f"{self.base_url}/{model_id}", token=self.token)

        if not isinstance(payload, dict):
            raise HubResponseError(f"failed to parse response: expected an object, got {type(payload).__name__}")

        return ModelDetails.from_dict(payload)

    def get_available_quants(self, model_id: str) -> List[str]:
        """
        Return the quantizations available in a GGUF repository.

        Args:
            model_id: Repository id

        Returns:
            Quantization labels in file-listing order (empty if none)
        """
        details = self.get_model_details(model_id)
        return extract_quants_from_siblings(details.siblings)

"""
HTTP Client for the Clash of Clans API with bearer token authentication.
"""

import logging
from typing import Dict, Optional, Any
import requests
from pydantic import ValidationError

from .exceptions import (
    HTTPStatusError,
    MalformedURLError,
    ResponseDecodeError,
    TransportError,
)
from .models import APIErrorBody
from .utils.tags import encode_tag

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.clashofclans.com"
DEFAULT_API_VERSION = "v1"


class HTTPClient:
    """Blocking HTTP client for the Clash of Clans API."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        if not token:
            raise ValueError("API token must not be empty")

        self._token = token
        self.base_url = base_url.rstrip('/')
        self.api_version = api_version.strip('/')
        self.timeout = timeout

        self._session = session if session is not None else requests.Session()

    @property
    def token(self) -> str:
        return self._token

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def build_url(self, path: str) -> str:
        """Join base URL, API version and an endpoint path."""
        return f"{self.base_url}/{self.api_version}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    def get(self, path: str) -> Dict[str, Any]:
        """
        Make authenticated GET request to the Clash of Clans API.

        Args:
            path: Endpoint path below the version segment (e.g., 'players/%23ABC')

        Returns:
            Decoded JSON object
        """
        url = self.build_url(path)
        logger.debug(f"Making request to {url}")

        try:
            response = self._session.get(url, headers=self._headers(), timeout=self.timeout)
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema
        ) as e:
            raise MalformedURLError(f"Malformed request URL {url}: {e}", url=url, cause=e) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}", url=url, cause=e) from e

        if 200 <= response.status_code < 400:
            return self._decode_body(response, url)

        raise self._status_error(response, url)

    def _decode_body(self, response: requests.Response, url: str) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Response from {url} is not valid JSON: {e}", url=url, cause=e) from e

        if not isinstance(body, dict):
            raise ResponseDecodeError(
                f"Response from {url} is a JSON {type(body).__name__}, expected an object",
                url=url
            )

        return body

    def _status_error(self, response: requests.Response, url: str) -> HTTPStatusError:
        try:
            body = response.json()
        except ValueError:
            body = None

        try:
            error_body = APIErrorBody.model_validate(body)
        except ValidationError:
            error_body = APIErrorBody(message=response.text)

        logger.warning(
            f"API request to {url} failed: {response.status_code} - {error_body.reason}"
        )
        return HTTPStatusError(
            response.status_code,
            error_body.reason,
            error_body.message,
            url=url
        )

    def get_player(self, tag: str) -> Dict[str, Any]:
        """Fetch the raw player document for a tag (with or without the '#')."""
        return self.get(f"players/{encode_tag(tag)}")

    @classmethod
    def from_env(cls, **kwargs) -> "HTTPClient":
        """Create client from environment variables."""
        from .auth import load_api_base_url, load_api_token

        kwargs.setdefault("base_url", load_api_base_url())
        return cls(token=load_api_token(), **kwargs)

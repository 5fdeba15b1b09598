"""
HTTP transport for the request client.

Owns the requests session, resolves endpoints against the base URL and turns
requests' exceptions into TransportError. Status codes are left for the
response interceptor to interpret.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ...constants import DEFAULT_TIMEOUT_SECONDS
from ...core.security import SensitiveDataSanitizer
from ...exceptions import TransportError


class HttpClient:
    """Session-backed HTTP transport bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_retries: int = 0,
        backoff_factor: float = 0.3,
    ):
        """Initialize the transport.

        Args:
            base_url: Base URL for all requests
            session: Optional existing session to use
            timeout: Request timeout in seconds
            max_retries: Connection-level retries for idempotent methods (0 disables)
            backoff_factor: Backoff factor for retries
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.session = session or self._create_session(max_retries, backoff_factor)

    def _create_session(self, max_retries: int, backoff_factor: float) -> requests.Session:
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})

        if max_retries > 0:
            # Status codes are never retried here; they belong to the response interceptor
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=backoff_factor,
                status_forcelist=[],
                allowed_methods=["HEAD", "GET", "OPTIONS"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)

        return session

    def send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send one request and return the raw response, whatever its status.

        Raises:
            TransportError: If no response was received (connection failure,
                timeout or another requests error)
        """
        url = self.build_url(endpoint)
        timeout = timeout if timeout is not None else self.timeout

        self.logger.debug(
            f"{method} {url} headers={SensitiveDataSanitizer.sanitize_headers(headers)} "
            f"body={SensitiveDataSanitizer.sanitize_payload(json)}"
        )

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                headers=headers,
                timeout=timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TransportError(
                f"timeout of {timeout}s exceeded", url=url, original_error=e
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError("Network Error", url=url, original_error=e) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Request to {url} failed: {e}", url=url, original_error=e
            ) from e

        self._log_response(response)
        return response

    def build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        # Relative endpoints are appended verbatim, never parsed as URLs of their own
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _log_response(self, response: requests.Response) -> None:
        self.logger.debug(
            f"Response: {response.status_code} - {len(response.content)} bytes"
        )

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

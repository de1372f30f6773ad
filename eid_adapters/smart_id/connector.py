"""
Smart-ID REST connector

HTTP transport for the Smart-ID relying party API session status endpoint.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .._version import __version__
from ..base.provider import SessionStatusConnector
from .exceptions import (
    InterruptedException,
    SessionNotFoundException,
    SmartIdAPIException,
    TechnicalErrorException,
)
from .models import SessionStatus, SessionStatusRequest, SmartIdConfig


logger = logging.getLogger(__name__)


class SmartIdConnector(SessionStatusConnector):
    """
    Connector for the Smart-ID session status API.

    Issues ``GET /session/{sessionId}`` long-poll requests. Transport
    failures are reported as InterruptedException; HTTP errors map to
    the Smart-ID exception hierarchy. No raw ``requests`` exception
    leaves this class.
    """

    def __init__(
        self,
        config: Optional[SmartIdConfig] = None,
        session: Optional[requests.Session] = None,
        retry_backoff_factor: float = 0.3,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize Smart-ID connector

        Args:
            config: Smart-ID configuration, defaults to the demo environment
            session: Preconfigured requests session to use instead of
                building one
            retry_backoff_factor: Backoff factor for connection and
                status retries
            user_agent: Custom user agent string
        """
        self.config = config or SmartIdConfig()

        if session is None:
            session = requests.Session()
            # A read timeout is a terminal interruption of the long poll
            retry_strategy = Retry(
                total=self.config.max_retries,
                read=False,
                backoff_factor=retry_backoff_factor,
                status_forcelist=[429, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)

        self.session = session
        self.session.headers.update({
            "User-Agent": user_agent or f"eid-adapters-python/{__version__}",
            "Accept": "application/json",
        })

        logger.info(f"Initialized Smart-ID connector for {self.config.host_url}")

    def get_session_status(self, request: SessionStatusRequest) -> SessionStatus:
        """
        Fetch the status of a Smart-ID session.

        Args:
            request: Session id and optional long-poll timeout

        Returns:
            Raw session status

        Raises:
            InterruptedException: If the connection failed or timed out
            SessionNotFoundException: If the session id is unknown
            SmartIdAPIException: If the API returned an error status
            TechnicalErrorException: If the response body is malformed
        """
        default_timeout_ms = self.config.session_status_response_socket_timeout_ms
        if not request.session_status_response_socket_timeout_ms and default_timeout_ms:
            request = replace(request, session_status_response_socket_timeout_ms=default_timeout_ms)

        url = f"{self.config.host_url}/session/{quote(request.session_id, safe='')}"
        params = request.to_query_params()

        try:
            logger.debug(f"Making GET request to {url} with {params}")
            response = self.session.get(
                url,
                params=params,
                timeout=self._request_timeout(request),
                verify=self.config.verify_ssl,
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Smart-ID session status request interrupted: {e}")
            raise InterruptedException(str(e))
        except requests.exceptions.RequestException as e:
            logger.error(f"Smart-ID session status request error: {e}")
            raise TechnicalErrorException(f"Session status request failed: {e}")

        logger.debug(f"Response: {response.status_code} - {response.reason}")
        self._raise_for_status(response, request.session_id)

        return self._parse_session_status(response)

    def _request_timeout(self, request: SessionStatusRequest):
        """(connect, read) timeout; the read timeout covers the long poll"""
        read_timeout = float(self.config.timeout)
        if request.session_status_response_socket_timeout_ms:
            read_timeout += request.session_status_response_socket_timeout_ms / 1000
        return (self.config.timeout, read_timeout)

    def _raise_for_status(self, response: requests.Response, session_id: str) -> None:
        if response.ok:
            return

        if response.status_code == 404:
            raise SessionNotFoundException(
                f"Smart-ID session {session_id} not found",
                session_id=session_id
            )

        if response.status_code in (401, 403):
            logger.error(f"Smart-ID rejected relying party credentials: {response.status_code}")
            raise SmartIdAPIException(
                f"Smart-ID request unauthorized: {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
                error_code="SMARTID_UNAUTHORIZED"
            )

        logger.error(f"Smart-ID API error: {response.status_code} - {response.text}")
        raise SmartIdAPIException(
            f"Smart-ID API error: {response.status_code}",
            status_code=response.status_code,
            response_body=response.text
        )

    def _parse_session_status(self, response: requests.Response) -> SessionStatus:
        try:
            data: Dict[str, Any] = response.json()
        except ValueError as e:
            raise TechnicalErrorException(f"Session status response is not valid JSON: {e}")

        try:
            return SessionStatus.model_validate(data)
        except ValidationError as e:
            raise TechnicalErrorException(f"Unexpected session status response: {e}")

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
        logger.info("Smart-ID connector session closed")

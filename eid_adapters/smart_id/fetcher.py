"""
Smart-ID Session Status Fetcher

Polls a Smart-ID session once, validates the returned status and turns a
successful outcome into a SmartIdAuthenticationResponse.
"""

import logging
from typing import Optional, Union

from ..base.provider import SessionStatusConnector
from .assembler import AuthenticationResponseAssembler
from .exceptions import (
    InterruptedException,
    SmartIdConfigurationException,
    SmartIdException,
    TechnicalErrorException,
)
from .models import (
    AuthenticationHash,
    SessionState,
    SessionStatus,
    SessionStatusRequest,
    SignableData,
    SmartIdAuthenticationResponse,
)
from .validation import SessionResultValidator


logger = logging.getLogger(__name__)

SignedDataSource = Union[SignableData, AuthenticationHash]


class SessionStatusFetcher:
    """
    Fetches and validates the status of a single Smart-ID session.

    Every call performs exactly one status request; a running session
    yields a response with only ``state`` set so the caller can decide
    when to poll again.

    Example:
        >>> fetcher = SessionStatusFetcher(connector) \\
        ...     .set_session_id(session_id) \\
        ...     .set_authentication_hash(authentication_hash)
        >>> response = fetcher.get_authentication_response()
        >>> if response.is_running_state():
        ...     ...  # poll again later
    """

    def __init__(
        self,
        connector: SessionStatusConnector,
        session_id: Optional[str] = None,
        data_to_sign: Optional[SignableData] = None,
        authentication_hash: Optional[AuthenticationHash] = None,
        session_status_response_socket_timeout_ms: Optional[int] = None,
        requested_certificate_level: Optional[str] = None,
        validator: Optional[SessionResultValidator] = None,
        assembler: Optional[AuthenticationResponseAssembler] = None,
    ):
        self.connector = connector
        self.session_id = session_id
        self.session_status_response_socket_timeout_ms = session_status_response_socket_timeout_ms
        self.requested_certificate_level = requested_certificate_level
        self.validator = validator or SessionResultValidator()
        self.assembler = assembler or AuthenticationResponseAssembler()

        self._signed_data_source: Optional[SignedDataSource] = None
        if data_to_sign is not None:
            self.set_data_to_sign(data_to_sign)
        if authentication_hash is not None:
            self.set_authentication_hash(authentication_hash)

    def set_session_id(self, session_id: str) -> "SessionStatusFetcher":
        self.session_id = session_id
        return self

    def set_data_to_sign(self, data_to_sign: SignableData) -> "SessionStatusFetcher":
        self._set_signed_data_source(data_to_sign)
        return self

    def set_authentication_hash(self, authentication_hash: AuthenticationHash) -> "SessionStatusFetcher":
        self._set_signed_data_source(authentication_hash)
        return self

    def set_session_status_response_socket_timeout_ms(self, timeout_ms: int) -> "SessionStatusFetcher":
        self.session_status_response_socket_timeout_ms = timeout_ms
        return self

    def set_requested_certificate_level(self, certificate_level: str) -> "SessionStatusFetcher":
        self.requested_certificate_level = certificate_level
        return self

    @property
    def signed_data_source(self) -> Optional[SignedDataSource]:
        return self._signed_data_source

    def get_authentication_response(self) -> SmartIdAuthenticationResponse:
        """
        Poll the session and build the authentication response.

        Returns:
            A running marker response or a fully populated response

        Raises:
            UserRefusedException: If the user refused the session
            SessionTimeoutException: If the session timed out
            DocumentUnusableException: If the user's document is unusable
            TechnicalErrorException: If polling failed or the response
                was incomplete or unexpected
            SmartIdConfigurationException: If the fetcher is not configured
        """
        session_status = self._fetch_session_status()

        try:
            self.validator.validate(session_status)
        except SmartIdException as e:
            logger.warning(f"Smart-ID session {self.session_id} failed: {e.error_code} - {e.message}")
            raise

        if session_status.is_running_state():
            logger.debug(f"Smart-ID session {self.session_id} is still running")
            return SmartIdAuthenticationResponse(state=SessionState.RUNNING.value)

        response = self.assembler.assemble(
            session_status,
            self._get_data_to_sign(),
            requested_certificate_level=self.requested_certificate_level,
        )
        logger.info(f"Smart-ID session {self.session_id} completed with {response.end_result}")
        return response

    def get_session_status(self) -> SessionStatus:
        """Fetch the raw, unvalidated session status"""
        request = self._create_session_status_request()
        logger.debug(f"Polling Smart-ID session {request.session_id}")
        return self.connector.get_session_status(request)

    def _fetch_session_status(self) -> SessionStatus:
        try:
            return self.get_session_status()
        except InterruptedException as e:
            logger.error(f"Smart-ID session {self.session_id} poll interrupted: {e.message}")
            raise TechnicalErrorException(f"Failed to poll session status: {e.message}") from e

    def _create_session_status_request(self) -> SessionStatusRequest:
        if not self.session_id:
            raise SmartIdConfigurationException(
                "Session id must be set before fetching session status",
                parameter="session_id"
            )
        return SessionStatusRequest(
            session_id=self.session_id,
            session_status_response_socket_timeout_ms=self.session_status_response_socket_timeout_ms or None,
        )

    def _set_signed_data_source(self, source: SignedDataSource) -> None:
        current = self._signed_data_source
        if current is not None and type(current) is not type(source):
            raise SmartIdConfigurationException(
                "Only one of data to sign or authentication hash can be set",
                parameter="signed_data_source"
            )
        self._signed_data_source = source

    def _get_data_to_sign(self) -> bytes:
        if self._signed_data_source is None:
            raise SmartIdConfigurationException(
                "Data to sign or authentication hash must be set",
                parameter="signed_data_source"
            )
        return self._signed_data_source.data_to_sign

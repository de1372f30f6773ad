"""
Smart-ID session status validation

Classifies a session status into running, completed successfully or one
of the failure categories of the Smart-ID service.
"""

import logging

from .exceptions import (
    DocumentUnusableException,
    SessionTimeoutException,
    TechnicalErrorException,
    UserRefusedException,
)
from .models import SessionEndResultCode, SessionStatus


logger = logging.getLogger(__name__)


class SessionResultValidator:
    """
    Validates Smart-ID session statuses.

    A running status always passes. A completed status passes only when
    its end result is OK and both the signature and the certificate are
    present; every other outcome raises the matching exception.
    """

    # Checked in order; the first match wins
    END_RESULT_FAILURES = (
        (SessionEndResultCode.USER_REFUSED, UserRefusedException),
        (SessionEndResultCode.TIMEOUT, SessionTimeoutException),
        (SessionEndResultCode.DOCUMENT_UNUSABLE, DocumentUnusableException),
    )

    def validate(self, session_status: SessionStatus) -> None:
        """
        Validate a session status.

        Raises:
            UserRefusedException: If the user refused the session
            SessionTimeoutException: If the user did not respond in time
            DocumentUnusableException: If the user's document is unusable
            TechnicalErrorException: If the response is incomplete or
                carries an unexpected end result
        """
        if session_status.is_running_state():
            return

        self.validate_result(session_status)
        self.validate_completeness(session_status)

    def validate_result(self, session_status: SessionStatus) -> None:
        """Check the end result of a completed session"""
        if session_status.is_running_state():
            return

        result = session_status.result
        if result is None:
            raise TechnicalErrorException("Result is missing in the session status response")

        end_result = result.end_result
        for code, exception_class in self.END_RESULT_FAILURES:
            if code.matches(end_result):
                logger.info(f"Smart-ID session ended with {code.value}")
                raise exception_class()

        if not SessionEndResultCode.OK.matches(end_result):
            logger.warning(f"Unexpected Smart-ID session end result: {end_result}")
            raise TechnicalErrorException(f"Session status end result is '{end_result or ''}'")

    def validate_completeness(self, session_status: SessionStatus) -> None:
        """Check that a successful session carries signature and certificate"""
        if session_status.is_running_state():
            return

        if session_status.signature is None:
            raise TechnicalErrorException("Signature was not present in the response")
        if session_status.cert is None:
            raise TechnicalErrorException("Certificate was not present in the response")

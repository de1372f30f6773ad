"""
Smart-ID specific exceptions
"""

from ..base.provider import AuthenticationError, CertificateError


class SmartIdException(AuthenticationError):
    """Base exception for Smart-ID operations"""

    default_message = "Smart-ID operation failed"
    default_error_code = "SMARTID_ERROR"

    def __init__(self, message: str = None, error_code: str = None, **kwargs):
        super().__init__(
            message or self.default_message,
            error_code=error_code or self.default_error_code,
            **kwargs
        )


class TechnicalErrorException(SmartIdException):
    """Raised when the service response violates the expected contract"""

    default_message = "Smart-ID technical error"
    default_error_code = "SMARTID_TECHNICAL_ERROR"


class SmartIdAPIException(TechnicalErrorException):
    """Raised when Smart-ID API calls return an unexpected HTTP status"""

    default_message = "Smart-ID API call failed"
    default_error_code = "SMARTID_API_ERROR"

    def __init__(self, message: str = None, status_code: int = None,
                 response_body: str = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.response_body = response_body


class UserRefusedException(SmartIdException):
    """Raised when the user refuses the operation in the Smart-ID app"""

    default_message = "User refused the Smart-ID session"
    default_error_code = "SMARTID_USER_REFUSED"


class SessionTimeoutException(SmartIdException):
    """Raised when the user did not respond within the session lifetime"""

    default_message = "Smart-ID session timed out"
    default_error_code = "SMARTID_SESSION_TIMEOUT"


class DocumentUnusableException(SmartIdException):
    """Raised when the user's Smart-ID account cannot be used"""

    default_message = "Smart-ID document is unusable"
    default_error_code = "SMARTID_DOCUMENT_UNUSABLE"


class SessionNotFoundException(SmartIdException):
    """Raised when the session id is unknown to the service"""

    default_message = "Smart-ID session not found"
    default_error_code = "SMARTID_SESSION_NOT_FOUND"

    def __init__(self, message: str = None, session_id: str = None, **kwargs):
        super().__init__(message, **kwargs)
        self.session_id = session_id


class InterruptedException(SmartIdException):
    """Raised by the transport when a status poll is interrupted"""

    default_message = "Smart-ID session status poll was interrupted"
    default_error_code = "SMARTID_INTERRUPTED"


class SmartIdConfigurationException(SmartIdException):
    """Raised when Smart-ID configuration is invalid"""

    default_message = "Invalid Smart-ID configuration"
    default_error_code = "SMARTID_CONFIG_ERROR"

    def __init__(self, message: str = None, parameter: str = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter


class CertificateParsingException(CertificateError):
    """Raised when a certificate returned by Smart-ID cannot be parsed"""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "SMARTID_CERTIFICATE_PARSE_ERROR")
        super().__init__(message, **kwargs)

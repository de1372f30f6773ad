"""
Base eID Provider Interface

This module defines the pieces shared by all electronic-identity provider
adapters: the error hierarchy, the abstract session status transport and
the generic certificate record.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field


@dataclass
class Certificate:
    """Represents a digital certificate"""
    certificate_data: bytes
    subject_dn: str
    issuer_dn: str
    serial_number: str
    valid_from: str
    valid_to: str
    certificate_chain: List[bytes] = field(default_factory=list)
    certificate_level: Optional[str] = None


class EIDProviderError(Exception):
    """Base exception for eID provider errors"""
    def __init__(self, message: str, error_code: str = None,
                 details: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class AuthenticationError(EIDProviderError):
    """Authentication-related errors"""
    pass


class CertificateError(EIDProviderError):
    """Certificate-related errors"""
    pass


class SessionStatusConnector(ABC):
    """
    Abstract transport for fetching the status of a remote session.

    Each provider adapter ships a concrete connector; fetchers only
    depend on this interface so they can be driven by a stub in tests.
    """

    @abstractmethod
    def get_session_status(self, request) -> Any:
        """
        Fetch the current status of a session.

        Args:
            request: Provider-specific session status request

        Returns:
            Provider-specific raw session status record

        Raises:
            EIDProviderError: If the status cannot be fetched
        """
        pass

    def close(self) -> None:
        """Release transport resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

"""
Shared building blocks for eID provider adapters.
"""

from .provider import (
    Certificate,
    EIDProviderError,
    AuthenticationError,
    CertificateError,
    SessionStatusConnector,
)

__all__ = [
    "Certificate",
    "EIDProviderError",
    "AuthenticationError",
    "CertificateError",
    "SessionStatusConnector",
]

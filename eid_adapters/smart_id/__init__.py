"""
Smart-ID Provider for Estonia, Latvia and Lithuania

Smart-ID is a mobile app-based electronic identity used across the
Baltic states. This adapter polls authentication sessions started with
the Smart-ID relying party API and turns completed sessions into
validated authentication responses.

Features:
- Long-poll session status retrieval
- End result classification (refused, timeout, unusable document)
- Strict signature value decoding
- Authentication certificate parsing
"""

from .assembler import AuthenticationResponseAssembler
from .certificate import AuthenticationCertificate, AuthenticationIdentity, CertificateParser
from .connector import SmartIdConnector
from .exceptions import (
    SmartIdException,
    TechnicalErrorException,
    SmartIdAPIException,
    UserRefusedException,
    SessionTimeoutException,
    DocumentUnusableException,
    SessionNotFoundException,
    InterruptedException,
    SmartIdConfigurationException,
    CertificateParsingException,
)
from .fetcher import SessionStatusFetcher
from .models import (
    SmartIdConfig,
    SmartIdEnvironment,
    SessionState,
    SessionEndResultCode,
    CertificateLevel,
    HashType,
    SessionResult,
    SessionSignature,
    SessionCertificate,
    SessionStatus,
    SessionStatusRequest,
    SignableData,
    AuthenticationHash,
    SmartIdAuthenticationResponse,
)
from .validation import SessionResultValidator

__all__ = [
    "SessionStatusFetcher",
    "SmartIdConnector",
    "SessionResultValidator",
    "AuthenticationResponseAssembler",
    "CertificateParser",
    "AuthenticationCertificate",
    "AuthenticationIdentity",
    "SmartIdConfig",
    "SmartIdEnvironment",
    "SessionState",
    "SessionEndResultCode",
    "CertificateLevel",
    "HashType",
    "SessionResult",
    "SessionSignature",
    "SessionCertificate",
    "SessionStatus",
    "SessionStatusRequest",
    "SignableData",
    "AuthenticationHash",
    "SmartIdAuthenticationResponse",
    "SmartIdException",
    "TechnicalErrorException",
    "SmartIdAPIException",
    "UserRefusedException",
    "SessionTimeoutException",
    "DocumentUnusableException",
    "SessionNotFoundException",
    "InterruptedException",
    "SmartIdConfigurationException",
    "CertificateParsingException",
]

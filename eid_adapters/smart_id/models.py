"""
Data models for Smart-ID session status integration
"""

import base64
import binascii
import hashlib
import os
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .certificate import AuthenticationCertificate, CertificateParser
from .exceptions import SmartIdConfigurationException, TechnicalErrorException


class SmartIdEnvironment(str, Enum):
    """Smart-ID environment types"""
    DEMO = "demo"
    PRODUCTION = "production"


class SessionState(str, Enum):
    """Smart-ID session states"""
    RUNNING = "RUNNING"
    COMPLETE = "COMPLETE"


class SessionEndResultCode(str, Enum):
    """Documented Smart-ID session end results"""
    OK = "OK"
    USER_REFUSED = "USER_REFUSED"
    TIMEOUT = "TIMEOUT"
    DOCUMENT_UNUSABLE = "DOCUMENT_UNUSABLE"
    WRONG_VC = "WRONG_VC"
    REQUIRED_INTERACTION_NOT_SUPPORTED_BY_APP = "REQUIRED_INTERACTION_NOT_SUPPORTED_BY_APP"
    USER_REFUSED_CERT_CHOICE = "USER_REFUSED_CERT_CHOICE"
    USER_REFUSED_DISPLAYTEXTANDPIN = "USER_REFUSED_DISPLAYTEXTANDPIN"
    USER_REFUSED_VC_CHOICE = "USER_REFUSED_VC_CHOICE"
    USER_REFUSED_CONFIRMATIONMESSAGE = "USER_REFUSED_CONFIRMATIONMESSAGE"
    USER_REFUSED_CONFIRMATIONMESSAGE_WITH_VC_CHOICE = "USER_REFUSED_CONFIRMATIONMESSAGE_WITH_VC_CHOICE"

    def matches(self, code: Optional[str]) -> bool:
        """Case-insensitive comparison against a raw end result code"""
        return (code or "").lower() == self.value.lower()


class CertificateLevel(str, Enum):
    """Smart-ID certificate levels"""
    ADVANCED = "ADVANCED"
    QUALIFIED = "QUALIFIED"


class HashType(str, Enum):
    """Hash algorithms supported for signable data"""
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    def digest(self, data: bytes) -> bytes:
        return hashlib.new(self.value, data).digest()


def calculate_verification_code(hash_value: bytes) -> str:
    """
    Calculate the four digit verification code shown in the Smart-ID app.

    The code is the last two bytes of SHA-256 over the hash, read as a
    big-endian integer modulo 10000.
    """
    digest = hashlib.sha256(hash_value).digest()
    return f"{int.from_bytes(digest[-2:], 'big') % 10000:04d}"


# Raw session status records, as returned by the service

class SessionResult(BaseModel):
    """Session end result"""
    end_result: Optional[str] = Field(None, alias="endResult")
    document_number: Optional[str] = Field(None, alias="documentNumber")

    class Config:
        frozen = True
        populate_by_name = True


class SessionSignature(BaseModel):
    """Signature returned for a completed session"""
    value: Optional[str] = None
    algorithm: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True


class SessionCertificate(BaseModel):
    """Signer certificate returned for a completed session"""
    value: Optional[str] = None
    certificate_level: Optional[str] = Field(None, alias="certificateLevel")

    class Config:
        frozen = True
        populate_by_name = True


class SessionStatus(BaseModel):
    """Raw Smart-ID session status"""
    state: SessionState
    result: Optional[SessionResult] = None
    signature: Optional[SessionSignature] = None
    cert: Optional[SessionCertificate] = None

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("state", mode="before")
    @classmethod
    def normalize_state(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    def is_running_state(self) -> bool:
        return self.state == SessionState.RUNNING


@dataclass(frozen=True)
class SessionStatusRequest:
    """Request for a single session status poll"""
    session_id: str
    session_status_response_socket_timeout_ms: Optional[int] = None

    def to_query_params(self) -> Dict[str, str]:
        params = {}
        if self.session_status_response_socket_timeout_ms:
            params["timeoutMs"] = str(self.session_status_response_socket_timeout_ms)
        return params


# Signed data sources

@dataclass(frozen=True)
class SignableData:
    """Raw data the user is asked to sign"""
    data_to_sign: bytes
    hash_type: HashType = HashType.SHA512

    def calculate_hash(self) -> bytes:
        return self.hash_type.digest(self.data_to_sign)

    def calculate_hash_in_base64(self) -> str:
        return base64.b64encode(self.calculate_hash()).decode("ascii")

    def calculate_verification_code(self) -> str:
        return calculate_verification_code(self.calculate_hash())


@dataclass(frozen=True)
class AuthenticationHash:
    """Precomputed hash sent to the user's device for authentication"""
    hash: bytes
    hash_type: HashType = HashType.SHA512

    @classmethod
    def generate_random_hash(cls, hash_type: HashType = HashType.SHA512) -> "AuthenticationHash":
        """Hash 64 random bytes with the given algorithm"""
        return cls(hash=hash_type.digest(secrets.token_bytes(64)), hash_type=hash_type)

    @property
    def data_to_sign(self) -> bytes:
        return self.hash

    def calculate_hash(self) -> bytes:
        return self.hash

    def calculate_hash_in_base64(self) -> str:
        return base64.b64encode(self.hash).decode("ascii")

    def calculate_verification_code(self) -> str:
        return calculate_verification_code(self.hash)


@dataclass(frozen=True)
class SmartIdAuthenticationResponse:
    """
    Validated Smart-ID authentication response.

    A response for a running session only carries ``state``; every other
    field is populated once the session has completed successfully.
    """

    state: Optional[str] = None
    end_result: Optional[str] = None
    signed_data: Optional[bytes] = None
    value_in_base64: Optional[str] = None
    algorithm_name: Optional[str] = None
    certificate: Optional[str] = None
    requested_certificate_level: Optional[str] = None
    certificate_level: Optional[str] = None

    @property
    def value(self) -> bytes:
        """Signature value, strictly decoded from base64"""
        try:
            return base64.b64decode(self.value_in_base64, validate=True)
        except (TypeError, ValueError, binascii.Error):
            raise TechnicalErrorException(
                "Failed to parse signature value in base64. "
                f"Probably incorrectly encoded base64 string: {self.value_in_base64}"
            )

    def is_running_state(self) -> bool:
        return (self.state or "").lower() == SessionState.RUNNING.value.lower()

    def get_parsed_certificate(self) -> Dict[str, Any]:
        return CertificateParser.parse_x509_certificate(self.certificate)

    def get_certificate_instance(self) -> AuthenticationCertificate:
        return AuthenticationCertificate.from_parsed(self.get_parsed_certificate())


# Configuration

SMARTID_HOST_URLS = {
    SmartIdEnvironment.DEMO: "https://sid.demo.sk.ee/smart-id-rp/v2",
    SmartIdEnvironment.PRODUCTION: "https://rp-api.smart-id.com/v2",
}


@dataclass
class SmartIdConfig:
    """Configuration for the Smart-ID session status connector"""

    environment: SmartIdEnvironment = SmartIdEnvironment.DEMO

    # Auto-configured based on environment when not given
    host_url: Optional[str] = None

    # HTTP configuration
    timeout: int = 30
    max_retries: int = 3
    verify_ssl: bool = True

    # Long-poll timeout forwarded to the service
    session_status_response_socket_timeout_ms: Optional[int] = None

    def __post_init__(self):
        """Auto-configure host URL based on environment"""
        if not isinstance(self.environment, SmartIdEnvironment):
            try:
                self.environment = SmartIdEnvironment(str(self.environment).lower())
            except ValueError:
                raise SmartIdConfigurationException(
                    f"Unknown Smart-ID environment: {self.environment}",
                    parameter="environment"
                )

        if not self.host_url:
            self.host_url = SMARTID_HOST_URLS[self.environment]
        self.host_url = self.host_url.rstrip("/")

        if self.timeout <= 0:
            raise SmartIdConfigurationException(
                "Timeout must be positive", parameter="timeout"
            )
        if self.max_retries < 0:
            raise SmartIdConfigurationException(
                "max_retries must not be negative", parameter="max_retries"
            )
        if (self.session_status_response_socket_timeout_ms is not None
                and self.session_status_response_socket_timeout_ms < 0):
            raise SmartIdConfigurationException(
                "Session status socket timeout must not be negative",
                parameter="session_status_response_socket_timeout_ms"
            )

    @classmethod
    def from_env(cls) -> "SmartIdConfig":
        """Build configuration from SMARTID_* environment variables"""
        kwargs: Dict[str, Any] = {
            "environment": os.getenv("SMARTID_ENVIRONMENT", SmartIdEnvironment.DEMO.value),
            "host_url": os.getenv("SMARTID_HOST_URL") or None,
        }

        verify_ssl = os.getenv("SMARTID_VERIFY_SSL", "").strip().lower()
        if verify_ssl in ("false", "0", "no"):
            kwargs["verify_ssl"] = False
        elif verify_ssl not in ("", "true", "1", "yes"):
            raise SmartIdConfigurationException(
                f"SMARTID_VERIFY_SSL must be true or false, got '{verify_ssl}'",
                parameter="verify_ssl"
            )

        int_settings = {
            "timeout": "SMARTID_TIMEOUT",
            "max_retries": "SMARTID_MAX_RETRIES",
            "session_status_response_socket_timeout_ms": "SMARTID_SESSION_STATUS_TIMEOUT_MS",
        }
        for parameter, variable in int_settings.items():
            raw = os.getenv(variable)
            if raw is None or raw == "":
                continue
            try:
                kwargs[parameter] = int(raw)
            except ValueError:
                raise SmartIdConfigurationException(
                    f"{variable} must be an integer, got '{raw}'",
                    parameter=parameter
                )

        return cls(**kwargs)

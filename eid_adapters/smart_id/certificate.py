"""
X.509 certificate parsing for Smart-ID authentication responses
"""

import base64
import binascii
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.x509.oid import NameOID

from ..base.provider import Certificate
from .exceptions import CertificateParsingException


logger = logging.getLogger(__name__)

# ETSI EN 319 412-1 semantics identifier, e.g. PNOEE-30303039914
_SEMANTICS_IDENTIFIER = re.compile(r"^(PNO|PAS|IDC)([A-Z]{2})-(.+)$")

_SUBJECT_FIELDS = {
    "common_name": NameOID.COMMON_NAME,
    "given_name": NameOID.GIVEN_NAME,
    "surname": NameOID.SURNAME,
    "serial_number": NameOID.SERIAL_NUMBER,
    "country": NameOID.COUNTRY_NAME,
}


def _name_attribute(name: x509.Name, oid: x509.ObjectIdentifier) -> Optional[str]:
    attributes = name.get_attributes_for_oid(oid)
    return attributes[0].value if attributes else None


class CertificateParser:
    """Parses certificates returned by the Smart-ID service"""

    @staticmethod
    def load_certificate(value: Union[str, bytes]) -> x509.Certificate:
        """
        Load a certificate given as base64 DER, raw DER or PEM.

        Raises:
            CertificateParsingException: If the value is not a certificate
        """
        if not value:
            raise CertificateParsingException("Certificate value is empty")

        try:
            if isinstance(value, bytes):
                if value.lstrip().startswith(b"-----BEGIN"):
                    return x509.load_pem_x509_certificate(value)
                return x509.load_der_x509_certificate(value)

            if value.lstrip().startswith("-----BEGIN"):
                return x509.load_pem_x509_certificate(value.encode())

            der = base64.b64decode("".join(value.split()), validate=True)
            return x509.load_der_x509_certificate(der)
        except (ValueError, TypeError, binascii.Error) as e:
            logger.error(f"Failed to parse certificate: {e}")
            raise CertificateParsingException(f"Failed to parse X.509 certificate: {e}")

    @classmethod
    def parse_x509_certificate(cls, value: Union[str, bytes]) -> Dict[str, Any]:
        """
        Parse certificate information from an X.509 certificate.

        Args:
            value: Certificate as returned in the session status

        Returns:
            Dictionary with subject, issuer, validity and subject fields
        """
        cert = cls.load_certificate(value)

        return {
            "subject": cert.subject.rfc4514_string(),
            "issuer": cert.issuer.rfc4514_string(),
            "serial_number": str(cert.serial_number),
            "valid_from": cert.not_valid_before_utc.isoformat(),
            "valid_to": cert.not_valid_after_utc.isoformat(),
            "subject_fields": {
                key: _name_attribute(cert.subject, oid)
                for key, oid in _SUBJECT_FIELDS.items()
            },
            "fingerprint_sha256": cert.fingerprint(hashes.SHA256()).hex(),
            "raw_certificate": cert.public_bytes(serialization.Encoding.DER),
        }


@dataclass(frozen=True)
class AuthenticationIdentity:
    """Person identified by a Smart-ID authentication certificate"""
    given_name: Optional[str]
    surname: Optional[str]
    identity_code: Optional[str]
    country: Optional[str]

    @classmethod
    def from_subject_fields(cls, fields: Dict[str, Optional[str]]) -> "AuthenticationIdentity":
        identity_code = fields.get("serial_number")
        country = fields.get("country")

        if identity_code:
            match = _SEMANTICS_IDENTIFIER.match(identity_code)
            if match:
                country = country or match.group(2)
                identity_code = match.group(3)

        return cls(
            given_name=fields.get("given_name"),
            surname=fields.get("surname"),
            identity_code=identity_code,
            country=country,
        )


@dataclass(frozen=True)
class AuthenticationCertificate:
    """Parsed Smart-ID authentication certificate"""
    subject: str
    issuer: str
    serial_number: str
    valid_from: str
    valid_to: str
    fingerprint_sha256: str
    identity: AuthenticationIdentity
    raw_certificate: bytes

    @classmethod
    def from_parsed(cls, parsed: Dict[str, Any]) -> "AuthenticationCertificate":
        return cls(
            subject=parsed["subject"],
            issuer=parsed["issuer"],
            serial_number=parsed["serial_number"],
            valid_from=parsed["valid_from"],
            valid_to=parsed["valid_to"],
            fingerprint_sha256=parsed["fingerprint_sha256"],
            identity=AuthenticationIdentity.from_subject_fields(parsed["subject_fields"]),
            raw_certificate=parsed["raw_certificate"],
        )

    def to_certificate(self, certificate_level: Optional[str] = None) -> Certificate:
        """Convert to the provider-neutral certificate record"""
        return Certificate(
            certificate_data=self.raw_certificate,
            subject_dn=self.subject,
            issuer_dn=self.issuer,
            serial_number=self.serial_number,
            valid_from=self.valid_from,
            valid_to=self.valid_to,
            certificate_level=certificate_level,
        )

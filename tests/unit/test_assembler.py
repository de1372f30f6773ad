"""
Unit tests for Smart-ID authentication response assembly
"""

import base64

import pytest

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '../../'))

from eid_adapters.smart_id.assembler import AuthenticationResponseAssembler
from eid_adapters.smart_id.models import (
    SessionStatus, SessionResult, SessionSignature, SessionCertificate
)
from eid_adapters.smart_id.exceptions import TechnicalErrorException


def ok_status(signature_value="AQID"):
    return SessionStatus(
        state="COMPLETE",
        result=SessionResult(end_result="OK"),
        signature=SessionSignature(value=signature_value, algorithm="sha256WithRSA"),
        cert=SessionCertificate(value="MIIDERCERT", certificate_level="QUALIFIED"),
    )


@pytest.fixture
def assembler():
    return AuthenticationResponseAssembler()


def test_assemble_copies_fields(assembler):
    """Test assembled response carries the raw status fields verbatim"""
    response = assembler.assemble(ok_status(), b"hello")

    assert response.state == "COMPLETE"
    assert response.end_result == "OK"
    assert response.signed_data == b"hello"
    assert response.value_in_base64 == "AQID"
    assert response.algorithm_name == "sha256WithRSA"
    assert response.certificate == "MIIDERCERT"
    assert response.certificate_level == "QUALIFIED"
    assert response.requested_certificate_level is None
    assert response.is_running_state() is False


def test_assemble_decodes_signature_lazily(assembler):
    """Test signature bytes are decoded on access"""
    response = assembler.assemble(ok_status(), b"hello")

    assert response.value == bytes([0x01, 0x02, 0x03])


def test_assemble_with_requested_level(assembler):
    """Test requested certificate level is recorded"""
    response = assembler.assemble(ok_status(), b"hello", requested_certificate_level="ADVANCED")

    assert response.requested_certificate_level == "ADVANCED"


def test_assemble_keeps_invalid_base64_until_read(assembler):
    """Test invalid base64 does not fail assembly but fails on decode"""
    response = assembler.assemble(ok_status(signature_value="AQI"), b"hello")

    assert response.value_in_base64 == "AQI"
    with pytest.raises(TechnicalErrorException, match="Failed to parse signature value"):
        response.value


def test_signature_round_trip(assembler):
    """Test signature bytes survive assembly unchanged"""
    signature = bytes(range(256))
    response = assembler.assemble(ok_status(base64.b64encode(signature).decode()), b"data")

    assert response.value == signature

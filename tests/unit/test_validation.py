"""
Unit tests for Smart-ID session result validation
"""

import pytest

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '../../'))

from eid_adapters.smart_id.models import (
    SessionStatus, SessionResult, SessionSignature, SessionCertificate
)
from eid_adapters.smart_id.validation import SessionResultValidator
from eid_adapters.smart_id.exceptions import (
    TechnicalErrorException, UserRefusedException, SessionTimeoutException,
    DocumentUnusableException
)


def complete_status(end_result="OK", signature=True, cert=True):
    return SessionStatus(
        state="COMPLETE",
        result=SessionResult(end_result=end_result),
        signature=SessionSignature(value="AQID", algorithm="sha256WithRSAEncryption") if signature else None,
        cert=SessionCertificate(value="MIIB", certificate_level="QUALIFIED") if cert else None,
    )


@pytest.fixture
def validator():
    return SessionResultValidator()


def test_running_status_passes(validator):
    """Test running status is accepted without further checks"""
    assert validator.validate(SessionStatus(state="RUNNING")) is None


def test_running_status_ignores_result_contents(validator):
    """Test running status passes even with a failing end result and garbage signature"""
    status = SessionStatus(
        state="RUNNING",
        result=SessionResult(end_result="USER_REFUSED"),
        signature=SessionSignature(value="not base64!", algorithm=None),
    )

    validator.validate(status)


def test_ok_status_passes(validator):
    """Test completed OK status with signature and certificate"""
    validator.validate(complete_status())


def test_ok_is_case_insensitive(validator):
    """Test OK end result comparison ignores case"""
    validator.validate(complete_status(end_result="ok"))


def test_missing_result(validator):
    """Test completed status without result"""
    with pytest.raises(TechnicalErrorException, match="Result is missing"):
        validator.validate(SessionStatus(state="COMPLETE"))


@pytest.mark.parametrize("end_result", ["USER_REFUSED", "user_refused", "User_Refused"])
def test_user_refused(validator, end_result):
    """Test USER_REFUSED in any case is a refusal"""
    with pytest.raises(UserRefusedException):
        validator.validate(complete_status(end_result=end_result, signature=False, cert=False))


def test_timeout(validator):
    """Test TIMEOUT end result"""
    with pytest.raises(SessionTimeoutException):
        validator.validate(complete_status(end_result="TIMEOUT", signature=False, cert=False))


def test_document_unusable(validator):
    """Test DOCUMENT_UNUSABLE end result"""
    with pytest.raises(DocumentUnusableException):
        validator.validate(complete_status(end_result="document_unusable"))


@pytest.mark.parametrize("end_result", ["WRONG_VC", "USER_REFUSED_CERT_CHOICE", "SOMETHING_NEW"])
def test_unexpected_end_result(validator, end_result):
    """Test any other end result is a technical error naming the code"""
    with pytest.raises(TechnicalErrorException) as exc_info:
        validator.validate(complete_status(end_result=end_result))

    assert f"'{end_result}'" in str(exc_info.value)
    assert exc_info.value.error_code == "SMARTID_TECHNICAL_ERROR"


def test_missing_end_result(validator):
    """Test result without endResult reports an empty end result"""
    with pytest.raises(TechnicalErrorException) as exc_info:
        validator.validate(complete_status(end_result=None))

    assert exc_info.value.message == "Session status end result is ''"


def test_ok_without_signature(validator):
    """Test OK status without signature is never accepted"""
    with pytest.raises(TechnicalErrorException, match="Signature was not present"):
        validator.validate(complete_status(signature=False))


def test_ok_without_certificate(validator):
    """Test OK status without certificate"""
    with pytest.raises(TechnicalErrorException, match="Certificate was not present"):
        validator.validate(complete_status(cert=False))


def test_refusal_checked_before_completeness(validator):
    """Test semantic failures win over missing signature and certificate"""
    with pytest.raises(SessionTimeoutException):
        validator.validate(complete_status(end_result="timeout", signature=False, cert=False))


def test_validate_result_only(validator):
    """Test end result check alone does not require signature"""
    validator.validate_result(complete_status(signature=False, cert=False))

    with pytest.raises(TechnicalErrorException):
        validator.validate_completeness(complete_status(signature=False))

"""
Builds authentication responses from validated Smart-ID session statuses
"""

from typing import Optional

from .models import SessionStatus, SmartIdAuthenticationResponse


class AuthenticationResponseAssembler:
    """Assembles a SmartIdAuthenticationResponse from a validated status"""

    def assemble(self, session_status: SessionStatus, signed_data: bytes,
                 requested_certificate_level: Optional[str] = None) -> SmartIdAuthenticationResponse:
        """
        Create the authentication response.

        The status must already have passed SessionResultValidator with an
        OK end result; the signature value is kept in base64 and only
        decoded when SmartIdAuthenticationResponse.value is read.

        Args:
            session_status: Validated, completed session status
            signed_data: Data the user's device signed
            requested_certificate_level: Level requested when the session
                was started, if known

        Returns:
            Fully populated authentication response
        """
        signature = session_status.signature
        certificate = session_status.cert

        return SmartIdAuthenticationResponse(
            state=session_status.state.value,
            end_result=session_status.result.end_result,
            signed_data=signed_data,
            value_in_base64=signature.value,
            algorithm_name=signature.algorithm,
            certificate=certificate.value,
            requested_certificate_level=requested_certificate_level,
            certificate_level=certificate.certificate_level,
        )

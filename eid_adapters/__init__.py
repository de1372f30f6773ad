"""
eID Provider Adapters

This package contains adapters for remote electronic-identity
authentication services.
"""

from ._version import __version__
from .smart_id import SessionStatusFetcher, SmartIdConnector

# eID provider registry: session status connector per provider
EID_PROVIDERS = {
    "smart_id": SmartIdConnector,
}

__all__ = [
    "__version__",
    "EID_PROVIDERS",
    "SessionStatusFetcher",
    "SmartIdConnector",
]

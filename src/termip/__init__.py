"""
termip - Terminal IP Geolocation Dashboard

Looks up an IP address or hostname with ip-api.com and shows the result
on a world map in the terminal.
"""

__version__ = "1.0.0"

from .app import TermIpApp, run
from .exceptions import ChannelClosed, LookupFailed, LookupRejected, TermIpError
from .models import Failure, FetchStatus, LookupResult, Pending, SessionState, Success

__all__ = [
    "run",
    "TermIpApp",
    "LookupResult",
    "FetchStatus",
    "SessionState",
    "Pending",
    "Success",
    "Failure",
    "TermIpError",
    "LookupFailed",
    "LookupRejected",
    "ChannelClosed",
]

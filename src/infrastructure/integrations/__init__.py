"""External integrations.

This package contains the client for the status service that owns the
outage and probe history.
"""

from src.infrastructure.integrations.status_api_client import StatusApiClient

__all__ = [
    "StatusApiClient",
]

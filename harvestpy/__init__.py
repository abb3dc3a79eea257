"""
harvestpy: a small client for the Harvest v2 time-tracking API.

- Builds authenticated requests (bearer token + Harvest-Account-Id)
- Decodes JSON envelopes and exposes pagination page numbers
- Maps error statuses to typed exceptions (AuthError for 401)
- Ships a CLI (`python -m harvestpy` or `harvestpy` if installed) that lists recent time entries
"""

from .api import (
    AuthError,
    Client,
    Context,
    ErrorResponse,
    HarvestError,
    ListOptions,
    Response,
    TimeEntriesListOptions,
)
from .models import TimeEntry

__version__ = "0.1.0"
__all__ = [
    'AuthError', 'Client', 'Context', 'ErrorResponse', 'HarvestError',
    'ListOptions', 'Response', 'TimeEntriesListOptions', 'TimeEntry',
]

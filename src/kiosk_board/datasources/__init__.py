"""External data source integrations.

Each subdirectory is one provider with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, code tables
    ├── models.py         # Dataclasses for parsed responses (optional)
    └── {feature}.py      # Fetch + parse functions

Providers:

- kma/   Korea Meteorological Administration ultra-short-term forecast
- neis/  NEIS school meal service

Every provider exposes two layers: a raw ``fetch_*`` call that raises on
transport or envelope errors, and a degrading wrapper that logs the failure
and returns sentinel values instead. The aggregator only calls the wrappers.
"""


class ProviderError(RuntimeError):
    """The provider answered, but not with a usable payload."""

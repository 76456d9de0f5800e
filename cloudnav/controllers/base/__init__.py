"""Data source base classes."""

from cloudnav.controllers.base.base_controller import (
    CredentialError,
    DataSource,
    FetchError,
    FetchResult,
    QueryStatus,
)

__all__ = ["CredentialError", "DataSource", "FetchError", "FetchResult", "QueryStatus"]

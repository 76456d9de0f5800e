"""Fetch execution and result delivery."""

from cloudnav.controllers.fetch.coordinator import FetchCoordinator, FetchOutcome

__all__ = ["FetchCoordinator", "FetchOutcome"]

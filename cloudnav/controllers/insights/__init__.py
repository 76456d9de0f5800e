"""Logs Insights query polling."""

from cloudnav.controllers.insights.poller import QueryPoller, QueryTimeoutError

__all__ = ["QueryPoller", "QueryTimeoutError"]

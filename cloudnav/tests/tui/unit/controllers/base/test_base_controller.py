"""Tests for the data source boundary."""

from __future__ import annotations

import pytest

from cloudnav.constants.enums import ResourceKind
from cloudnav.controllers.base.base_controller import (
    CredentialError,
    DataSource,
    FetchError,
    FetchResult,
    QueryStatus,
)
from cloudnav.models.core.resources import ConnectionContext
from cloudnav.navigation.effects import FetchScope


class TestFetchResult:
    """Tests for FetchResult dataclass."""

    def test_fetch_result_defaults(self) -> None:
        """Test FetchResult default values."""
        result = FetchResult()
        assert result.items == []
        assert result.error is None
        assert result.duration_ms == 0.0
        assert result.success is True

    def test_fetch_result_error(self) -> None:
        """Test error fetch result."""
        result = FetchResult(error="AccessDenied")
        assert result.success is False


class TestQueryStatus:
    """Tests for QueryStatus dataclass."""

    def test_query_status_defaults(self) -> None:
        """Test QueryStatus default values."""
        status = QueryStatus(complete=False)
        assert status.items == []
        assert status.failed is False
        assert status.message is None


class TestErrors:
    """Tests for the fetch error hierarchy."""

    def test_credential_error_is_fetch_error(self) -> None:
        """Test that credential errors are caught as fetch errors."""
        assert issubclass(CredentialError, FetchError)


class TestDataSource:
    """Tests for DataSource abstract class."""

    def test_data_source_is_abstract(self) -> None:
        """Test that DataSource cannot be instantiated directly."""
        with pytest.raises(TypeError):
            DataSource()

    @pytest.mark.asyncio
    async def test_queries_unsupported_by_default(self) -> None:
        """Test that a source without query support raises FetchError."""

        class ListOnlySource(DataSource):
            async def list(self, kind: ResourceKind, scope: FetchScope) -> FetchResult:
                return FetchResult()

            async def list_children(
                self, kind: ResourceKind, scope: FetchScope, path: str
            ) -> FetchResult:
                return FetchResult()

        source = ListOnlySource()
        scope = FetchScope(context=ConnectionContext(profile="dev", region="us-east-1"))
        with pytest.raises(FetchError):
            await source.start_query(scope, "fields @message")
        with pytest.raises(FetchError):
            await source.query_status(scope, "query-1")

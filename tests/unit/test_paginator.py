"""Unit tests for TransactionPaginator."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from solana_wrapped.clients.transaction_client import TransactionClient, TransactionPage
from solana_wrapped.config import WrappedConfig
from solana_wrapped.services.paginator import TransactionPaginator
from solana_wrapped.utils.errors import HeliusRpcError
from tests.fixtures.common import WALLET


def page(size, token=None, prefix="sig"):
    return TransactionPage(
        transactions=[{"signature": f"{prefix}{i}"} for i in range(size)],
        pagination_token=token
    )


@pytest.fixture
def mock_client():
    """Create a mock transaction client."""
    return AsyncMock(spec=TransactionClient)


@pytest.mark.asyncio
async def test_stops_on_short_page(mock_client, wrapped_config):
    mock_client.get_transactions_page.side_effect = [page(100, "tok1"), page(30, "tok2")]

    result = await TransactionPaginator(mock_client, wrapped_config).fetch_all(WALLET)

    assert result.pages_fetched == 2
    assert len(result.transactions) == 130
    assert mock_client.get_transactions_page.await_count == 2


@pytest.mark.asyncio
async def test_forwards_year_start_and_token(mock_client, wrapped_config):
    mock_client.get_transactions_page.side_effect = [page(100, "tok1"), page(0)]

    await TransactionPaginator(mock_client, wrapped_config).fetch_all(WALLET)

    first, second = mock_client.get_transactions_page.await_args_list
    assert first.args == (WALLET, 1735689600)
    assert first.kwargs == {"limit": 100, "pagination_token": None}
    assert second.kwargs["pagination_token"] == "tok1"


@pytest.mark.asyncio
async def test_stops_at_max_pages(mock_client):
    config = WrappedConfig(page_size=10, max_pages=3, page_delay_seconds=0)
    mock_client.get_transactions_page.side_effect = [page(10, f"tok{i}") for i in range(5)]

    result = await TransactionPaginator(mock_client, config).fetch_all(WALLET)

    assert result.pages_fetched == 3
    assert len(result.transactions) == 30
    assert mock_client.get_transactions_page.await_count == 3


@pytest.mark.asyncio
async def test_stops_without_continuation_token(mock_client, wrapped_config):
    mock_client.get_transactions_page.return_value = page(100, None)

    result = await TransactionPaginator(mock_client, wrapped_config).fetch_all(WALLET)

    assert result.pages_fetched == 1
    assert mock_client.get_transactions_page.await_count == 1


@pytest.mark.asyncio
async def test_first_page_failure_raises(mock_client, wrapped_config):
    mock_client.get_transactions_page.side_effect = HeliusRpcError("Rate limited")

    with pytest.raises(HeliusRpcError, match="Rate limited"):
        await TransactionPaginator(mock_client, wrapped_config).fetch_all(WALLET)


@pytest.mark.asyncio
async def test_later_page_failure_keeps_partial_results(mock_client, wrapped_config):
    mock_client.get_transactions_page.side_effect = [
        page(100, "tok1"),
        httpx.ConnectError("connection reset"),
    ]

    result = await TransactionPaginator(mock_client, wrapped_config).fetch_all(WALLET)

    assert result.pages_fetched == 1
    assert len(result.transactions) == 100


@pytest.mark.asyncio
async def test_waits_between_pages(mock_client):
    config = WrappedConfig(page_size=1, max_pages=5, page_delay_seconds=0.25)
    mock_client.get_transactions_page.side_effect = [page(1, "a"), page(1, "b"), page(0)]

    with patch("solana_wrapped.services.paginator.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
        result = await TransactionPaginator(mock_client, config).fetch_all(WALLET)

    assert result.pages_fetched == 3
    assert mock_sleep.await_count == 2
    mock_sleep.assert_awaited_with(0.25)

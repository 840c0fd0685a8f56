"""
Concurrent input fetching for MRP.

The four input datasets are independent reads, so they are issued
together. If any read fails the whole fetch fails: planning on a
partial snapshot would turn "could not load pending supply" into
"no pending supply" and overstate every shortage.

Retrying is left to the caller.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when an input dataset cannot be read."""

    def __init__(self, dataset: str, cause: BaseException):
        self.dataset = dataset
        self.cause = cause
        super().__init__(f"Failed to fetch {dataset}: {cause!r}")


class SnapshotSource(Protocol):
    """Anything that can read the four planning inputs for one tenant."""

    async def fetch_orders(self) -> Sequence[Any]: ...

    async def fetch_bom_lines(self) -> Sequence[Any]: ...

    async def fetch_stock(self) -> Sequence[Any]: ...

    async def fetch_pending_supply(self) -> Sequence[Any]: ...


@dataclass
class RawSnapshot:
    """The four datasets exactly as the source returned them."""

    orders: Sequence[Any]
    bom_lines: Sequence[Any]
    stock: Sequence[Any]
    pending_supply: Sequence[Any]


class InMemorySource:
    """SnapshotSource over pre-loaded lists (files, tests, request bodies)."""

    def __init__(
        self,
        orders: Sequence[Any],
        bom_lines: Sequence[Any],
        stock: Sequence[Any],
        pending_supply: Sequence[Any],
    ):
        self.orders = orders
        self.bom_lines = bom_lines
        self.stock = stock
        self.pending_supply = pending_supply

    async def fetch_orders(self) -> Sequence[Any]:
        return self.orders

    async def fetch_bom_lines(self) -> Sequence[Any]:
        return self.bom_lines

    async def fetch_stock(self) -> Sequence[Any]:
        return self.stock

    async def fetch_pending_supply(self) -> Sequence[Any]:
        return self.pending_supply


async def _read(dataset: str, pending: Awaitable[Sequence[Any]]) -> Sequence[Any]:
    try:
        data = await pending
    except Exception as e:
        raise FetchError(dataset, e) from e
    if data is None:
        raise FetchError(dataset, ValueError("source returned no data"))
    return data


async def fetch_snapshot(
    source: SnapshotSource,
    timeout: Optional[float] = None,
) -> RawSnapshot:
    """Read all four datasets concurrently.

    Args:
        source: Where to read from
        timeout: Optional limit in seconds for the whole fetch

    Returns:
        RawSnapshot with every dataset loaded

    Raises:
        FetchError: If any read fails or the fetch times out
    """
    reads = asyncio.gather(
        _read("orders", source.fetch_orders()),
        _read("bom_lines", source.fetch_bom_lines()),
        _read("stock", source.fetch_stock()),
        _read("pending_supply", source.fetch_pending_supply()),
        return_exceptions=True,
    )

    try:
        results = await asyncio.wait_for(reads, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise FetchError("snapshot", e) from e

    for result in results:
        if isinstance(result, BaseException):
            logger.error("Input fetch failed: %s", result)
            raise result

    orders, bom_lines, stock, pending_supply = results
    logger.debug(
        "Fetched %d orders, %d BOM lines, %d stock records, %d supply lines",
        len(orders), len(bom_lines), len(stock), len(pending_supply),
    )
    return RawSnapshot(
        orders=orders,
        bom_lines=bom_lines,
        stock=stock,
        pending_supply=pending_supply,
    )

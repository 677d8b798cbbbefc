"""Catalog store: the fetched item list and its load status."""

import logging
from typing import Optional

from .errors import OrderError
from .models import Item, ItemId
from .order_client import LOAD_ITEMS_FAILED, OrderApiClient
from .status import RequestStatus

logger = logging.getLogger(__name__)


class CatalogStore:
    """Holds the last successfully fetched catalog."""

    def __init__(self, api: OrderApiClient) -> None:
        self.api = api
        self._items: list[Item] = []
        self._error: Optional[str] = None
        self.status = RequestStatus.idle()

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    @property
    def error(self) -> Optional[str]:
        """Message of the last failed load. Stays visible during a reload until it succeeds."""
        return self._error

    @property
    def is_loading(self) -> bool:
        return self.status.is_loading

    def get(self, item_id: ItemId) -> Optional[Item]:
        """Look up an item by id."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    async def load(self) -> RequestStatus:
        """
        Fetch the catalog once.

        On success the item list is replaced. On failure the previous list is
        kept and the status carries a generic message. A previous error
        is cleared only when a load succeeds. Calls are not deduplicated.
        """
        self.status = RequestStatus.loading()
        try:
            items = await self.api.fetch_products()
        except OrderError as e:
            logger.error(f"Error fetching items: {e.message}")
            self.status = RequestStatus.failed(LOAD_ITEMS_FAILED, error=e)
            self._error = LOAD_ITEMS_FAILED
            return self.status

        self._items = list(items)
        self._error = None
        self.status = RequestStatus.succeeded(self.items)
        return self.status

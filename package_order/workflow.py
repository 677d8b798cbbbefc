"""Order workflow: the single owner of catalog, selection and submission state."""

import logging
from typing import Any, Optional

from .aggregator import aggregate
from .catalog import CatalogStore
from .config import Settings
from .models import ItemId, OrderSummary
from .order_client import OrderApiClient
from .selection import SelectionSet
from .status import RequestStatus
from .submission import OrderSubmission

logger = logging.getLogger(__name__)


class OrderWorkflow:
    """
    Ties the catalog, the selection and the submission together.

    All state a user interface shows lives here and changes only through
    the methods below or when a request started by them completes.
    """

    def __init__(self, api: OrderApiClient) -> None:
        self.api = api
        self.catalog = CatalogStore(api)
        self.selection = SelectionSet()
        self.submission = OrderSubmission(api)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "OrderWorkflow":
        """Build a workflow talking to the configured API."""
        settings = settings or Settings.from_env()
        return cls(OrderApiClient.from_settings(settings))

    async def __aenter__(self) -> "OrderWorkflow":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def start(self) -> RequestStatus:
        """Initial catalog load."""
        logger.info(f"Starting order workflow against {self.api.base_url}")
        return await self.catalog.load()

    def toggle(self, item_id: ItemId) -> bool:
        selected = self.selection.toggle(item_id)
        if self.catalog.get(item_id) is None:
            logger.debug(f"Item {item_id!r} is not in the current catalog")
        return selected

    async def submit(self) -> RequestStatus:
        return await self.submission.submit(self.selection)

    @property
    def is_loading(self) -> bool:
        return self.catalog.is_loading or self.submission.is_loading

    @property
    def can_submit(self) -> bool:
        """Whether a submit action should be enabled."""
        return not self.is_loading and not self.selection.is_empty

    @property
    def error(self) -> Optional[str]:
        """
        Message for the error banner.

        The submission error wins whenever the latest submission failed, even
        if a catalog reload failed after it; otherwise the catalog error.
        """
        return self.submission.error or self.catalog.error

    @property
    def summary(self) -> Optional[OrderSummary]:
        packages = self.submission.packages
        if packages is None:
            return None
        return aggregate(packages)

    def snapshot_state(self) -> dict[str, Any]:
        """JSON-friendly view of everything the interface renders."""
        summary = self.summary
        return {
            "items": [item.model_dump(mode="json") for item in self.catalog.items],
            "catalog": self.catalog.status.describe(),
            "selection": self.selection.snapshot(),
            "submission": self.submission.status.describe(),
            "loading": self.is_loading,
            "can_submit": self.can_submit,
            "error": self.error,
            "summary": summary.model_dump(mode="json") if summary else None,
        }

    async def aclose(self) -> None:
        await self.api.aclose()

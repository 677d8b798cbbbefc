"""Order submission: turns a selection into packages via the calculation service."""

import logging
from typing import Optional

from .errors import OrderError, ValidationError
from .models import Package
from .order_client import OrderApiClient
from .selection import SelectionSet
from .status import RequestStatus

logger = logging.getLogger(__name__)

EMPTY_SELECTION = "Please select at least one item"


class OrderSubmission:
    """
    Drives the calculate request and owns its status.

    Overlapping calls to submit() are not serialized: every call issues its
    own request and whichever response arrives last overwrites the status.
    """

    def __init__(self, api: OrderApiClient) -> None:
        self.api = api
        self.status = RequestStatus.idle()
        self.in_flight = 0

    @property
    def packages(self) -> Optional[list[Package]]:
        """Packages of the latest successful submission, if the status is Succeeded."""
        return self.status.payload if self.status.is_succeeded else None

    @property
    def error(self) -> Optional[str]:
        return self.status.message if self.status.is_failed else None

    @property
    def is_loading(self) -> bool:
        return self.in_flight > 0

    async def submit(self, selection: SelectionSet) -> RequestStatus:
        """
        Submit the current selection once.

        Args:
            selection: Selection to snapshot and send

        Returns:
            The status this call ended in (Succeeded or Failed)
        """
        if selection.is_empty:
            logger.warning("Submit rejected: empty selection")
            status = RequestStatus.failed(EMPTY_SELECTION, error=ValidationError(EMPTY_SELECTION))
            self.status = status
            return status

        item_ids = selection.snapshot()
        logger.info(f"Submitting order with {len(item_ids)} items: {item_ids}")

        self.status = RequestStatus.loading()
        self.in_flight += 1
        try:
            packages = await self.api.calculate_order(item_ids)
        except OrderError as e:
            logger.error(f"Error processing order: {e.message}")
            status = RequestStatus.failed(e.message, error=e)
        else:
            status = RequestStatus.succeeded(packages)
        finally:
            self.in_flight -= 1

        if self.in_flight:
            logger.info(f"{self.in_flight} submission(s) still pending, latest response wins")
        self.status = status
        return status

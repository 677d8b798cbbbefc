"""HTTP client for the catalog and order calculation services."""

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence

import httpx
import pydantic

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT, Settings
from .errors import ServiceError, TransportError
from .models import CalculateRequest, CalculateResponse, Item, ItemId, Package, ProductsResponse

logger = logging.getLogger(__name__)

LOAD_ITEMS_FAILED = "Failed to load items"
PROCESS_ORDER_FAILED = "Failed to process order"


class OrderApiClient:
    """Client for the order API (``/products`` and ``/orders/calculate``)."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API, e.g. http://localhost:3000/api/v1
            timeout: Request timeout in seconds
            client: Pre-built httpx client to use instead of creating one.
                It must already carry the base URL. It is not closed by aclose().
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "OrderApiClient":
        """Create a client from loaded settings."""
        return cls(base_url=settings.api_url, timeout=settings.timeout)

    async def __aenter__(self) -> "OrderApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _request_json(self, method: str, path: str, failure_message: str, **kwargs: Any) -> Any:
        """
        Send one request and decode its JSON body.

        JSON numbers with a fraction are decoded as Decimal so that prices
        keep the exact precision the server sent.

        Raises:
            TransportError: On network failure, non-OK status or a non-JSON body
        """
        logger.info(f"{method} {path}")
        try:
            response = await self.client.request(method, path, **kwargs)
            logger.info(f"{method} {path} -> {response.status_code}")
            response.raise_for_status()
            return response.json(parse_float=Decimal)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}", exc_info=True)
            raise TransportError(failure_message) from e
        except ValueError as e:
            logger.error(f"{method} {path} returned a malformed body: {e}", exc_info=True)
            raise TransportError(failure_message) from e

    async def fetch_products(self) -> list[Item]:
        """
        Fetch the catalog.

        Returns:
            Catalog items in server order

        Raises:
            ServiceError: If the server answers with success=false
            TransportError: On transport or parse failure
        """
        data = await self._request_json("GET", "/products", LOAD_ITEMS_FAILED)

        try:
            envelope = ProductsResponse.model_validate(data)
        except pydantic.ValidationError as e:
            logger.error(f"Unexpected catalog payload: {e}")
            raise TransportError(LOAD_ITEMS_FAILED) from e

        if not envelope.success:
            logger.warning(f"Catalog service reported failure: {envelope.error}")
            raise ServiceError(LOAD_ITEMS_FAILED)

        logger.info(f"Fetched {len(envelope.data)} items")
        return envelope.data

    async def calculate_order(self, item_ids: Sequence[ItemId]) -> list[Package]:
        """
        Ask the calculation service to split the selected items into packages.

        Args:
            item_ids: Selected item ids, in the order they should be sent

        Returns:
            Packages in server order

        Raises:
            ServiceError: If the server answers with success=false
            TransportError: On transport or parse failure
        """
        request = CalculateRequest(item_ids=list(item_ids))
        data = await self._request_json(
            "POST",
            "/orders/calculate",
            PROCESS_ORDER_FAILED,
            json=request.model_dump(by_alias=True),
            headers={"Content-Type": "application/json"},
        )

        try:
            envelope = CalculateResponse.model_validate(data)
        except pydantic.ValidationError as e:
            logger.error(f"Unexpected calculation payload: {e}")
            raise TransportError(PROCESS_ORDER_FAILED) from e

        if not envelope.success:
            logger.warning(f"Calculation service reported failure: {envelope.error}")
            raise ServiceError(envelope.error or PROCESS_ORDER_FAILED)

        if envelope.data is None:
            logger.error("Calculation succeeded without a data section")
            raise TransportError(PROCESS_ORDER_FAILED)

        logger.info(f"Order split into {len(envelope.data.packages)} packages")
        return envelope.data.packages

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

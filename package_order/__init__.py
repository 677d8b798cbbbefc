"""Client-side ordering workflow for a package-shipping storefront."""

from .aggregator import aggregate, format_currency
from .catalog import CatalogStore
from .config import Settings
from .errors import OrderError, ServiceError, TransportError, ValidationError
from .models import Item, OrderSummary, Package, PackageView
from .order_client import OrderApiClient
from .selection import SelectionSet
from .status import RequestState, RequestStatus
from .submission import OrderSubmission
from .workflow import OrderWorkflow

__version__ = "0.1.0"

__all__ = [
    "CatalogStore",
    "Item",
    "OrderApiClient",
    "OrderError",
    "OrderSubmission",
    "OrderSummary",
    "OrderWorkflow",
    "Package",
    "PackageView",
    "RequestState",
    "RequestStatus",
    "SelectionSet",
    "ServiceError",
    "Settings",
    "TransportError",
    "ValidationError",
    "aggregate",
    "format_currency",
]

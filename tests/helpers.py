"""Fake catalog/calculation services and response builders for tests."""

import json
from typing import Any, Callable, Optional

import httpx
from fastapi import APIRouter, FastAPI, Request, Response

from package_order.order_client import OrderApiClient

API_URL = "http://orders.test/api/v1"

CATALOG = [
    {"id": 1, "name": "A", "price": 10.00, "weight": 100},
    {"id": 2, "name": "B", "price": 20.00, "weight": 200},
    {"id": 3, "name": "C", "price": 35.50, "weight": 450},
]


def courier_price_for(weight: int) -> str:
    """Toy courier tariff used by the fake calculation service."""
    if weight <= 100:
        return "5.00"
    if weight <= 200:
        return "7.50"
    return "12.25"


def package_json(items: list[str], total_weight: int, total_price: str, courier_price: str) -> str:
    return '{"items": %s, "totalWeight": %d, "totalPrice": %s, "courierPrice": %s}' % (
        json.dumps(items),
        total_weight,
        total_price,
        courier_price,
    )


def calculate_success(*packages: str) -> str:
    return '{"success": true, "data": {"packages": [%s]}}' % ", ".join(packages)


def build_fake_service() -> FastAPI:
    """
    Stand-in for the catalog and calculation services.

    Every selected item ships in its own package. Set
    ``app.state.calculate_error`` to make the calculation fail, and
    ``app.state.catalog_available = False`` to make the catalog fail.
    ``app.state.calculate_requests`` records every received body.
    """
    app = FastAPI()
    app.state.catalog_available = True
    app.state.calculate_error = None
    app.state.calculate_requests = []
    router = APIRouter(prefix="/api/v1")

    @router.get("/products")
    async def products():
        if not app.state.catalog_available:
            return {"success": False, "error": "catalog offline"}
        return {"success": True, "data": CATALOG}

    @router.post("/orders/calculate")
    async def calculate(request: Request):
        body = await request.json()
        app.state.calculate_requests.append(body)
        if app.state.calculate_error:
            return {"success": False, "error": app.state.calculate_error}

        by_id = {item["id"]: item for item in CATALOG}
        packages = [
            package_json(
                [by_id[item_id]["name"]],
                by_id[item_id]["weight"],
                "%.2f" % by_id[item_id]["price"],
                courier_price_for(by_id[item_id]["weight"]),
            )
            for item_id in body["itemIds"]
        ]
        # hand-written JSON so prices keep their trailing zeros on the wire
        return Response(content=calculate_success(*packages), media_type="application/json")

    app.include_router(router)
    return app


class RecordingTransport:
    """Builds an API client on httpx.MockTransport and records requests."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def _handle(self, request: httpx.Request):
        self.requests.append(request)
        return self.handler(request)

    def api(self) -> OrderApiClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self._handle), base_url=API_URL)
        return OrderApiClient(base_url=API_URL, client=client)


def json_response(body: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=body)


def raw_json_response(content: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=content.encode(), headers={"Content-Type": "application/json"})


def read_body(request: httpx.Request) -> Optional[dict]:
    if not request.content:
        return None
    return json.loads(request.content)

"""HTTP facade exposing the order workflow."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from . import __version__
from .config import Settings
from .models import ItemId
from .workflow import OrderWorkflow

logger = logging.getLogger(__name__)


# Request Models
class ToggleRequest(BaseModel):
    item_id: ItemId


def get_workflow(request: Request) -> OrderWorkflow:
    return request.app.state.workflow


def create_app(workflow: Optional[OrderWorkflow] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        workflow: Workflow to serve (default: one built from settings)
        settings: Settings used when no workflow is given (default: from environment)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the workflow and load the catalog on startup."""
        logger.info("Starting Package Order HTTP Server...")
        app.state.workflow = workflow or OrderWorkflow.from_settings(settings)
        await app.state.workflow.start()

        yield

        logger.info("Shutting down Package Order HTTP Server...")
        await app.state.workflow.aclose()

    app = FastAPI(
        title="Package Order Client",
        description="Select catalog items and calculate shipment packages",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Package Order Client",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "items": {"list": "GET /items", "reload": "POST /items/reload"},
                "selection": {"get": "GET /selection", "toggle": "POST /selection/toggle"},
                "orders": {"submit": "POST /orders/submit", "result": "GET /orders/result"},
                "state": "GET /state",
            },
        }

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        workflow = get_workflow(request)
        return {
            "status": "healthy",
            "api_url": workflow.api.base_url,
            "catalog": workflow.catalog.status.state.value,
        }

    # Catalog endpoints
    @app.get("/items")
    async def list_items(request: Request):
        """List the loaded catalog."""
        workflow = get_workflow(request)
        return {
            "count": len(workflow.catalog.items),
            "items": [item.model_dump(mode="json") for item in workflow.catalog.items],
            "status": workflow.catalog.status.describe(),
            "error": workflow.catalog.error,
        }

    @app.post("/items/reload")
    async def reload_items(request: Request):
        """Fetch the catalog again."""
        workflow = get_workflow(request)
        try:
            status = await workflow.catalog.load()
        except Exception as e:
            logger.error(f"Reload error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=str(e))

        return {
            "success": status.is_succeeded,
            "count": len(workflow.catalog.items),
            "error": workflow.catalog.error,
        }

    # Selection endpoints
    @app.get("/selection")
    async def get_selection(request: Request):
        """Get the selected item ids."""
        workflow = get_workflow(request)
        return {
            "count": len(workflow.selection),
            "item_ids": workflow.selection.snapshot(),
            "can_submit": workflow.can_submit,
        }

    @app.post("/selection/toggle")
    async def toggle_selection(body: ToggleRequest, request: Request):
        """Select or deselect one item."""
        workflow = get_workflow(request)
        selected = workflow.toggle(body.item_id)
        return {
            "item_id": body.item_id,
            "selected": selected,
            "item_ids": workflow.selection.snapshot(),
        }

    # Order endpoints
    @app.post("/orders/submit")
    async def submit_order(request: Request):
        """Submit the current selection for package calculation."""
        workflow = get_workflow(request)
        try:
            status = await workflow.submit()
        except Exception as e:
            logger.error(f"Submit error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=str(e))

        if status.is_failed:
            return {"success": False, "error": status.message, "status": status.describe()}

        summary = workflow.summary
        return {
            "success": True,
            "status": status.describe(),
            "summary": summary.model_dump(mode="json") if summary else None,
        }

    @app.get("/orders/result")
    async def order_result(request: Request):
        """Latest submission status and summary."""
        workflow = get_workflow(request)
        summary = workflow.summary
        return {
            "status": workflow.submission.status.describe(),
            "error": workflow.submission.error,
            "summary": summary.model_dump(mode="json") if summary else None,
        }

    @app.get("/state")
    async def full_state(request: Request):
        """Everything the interface renders."""
        return get_workflow(request).snapshot_state()

    return app


def run_http_server(host: str = "0.0.0.0", port: int = 8000, settings: Optional[Settings] = None):
    """Run the HTTP server."""
    import uvicorn

    settings = settings or Settings.from_env()
    uvicorn.run(create_app(settings=settings), host=host, port=port, log_level=settings.log_level.lower())

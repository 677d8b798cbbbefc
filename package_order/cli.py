"""Command-line interface for the package order client."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from .config import LOG_LEVELS, Settings
from .models import ItemId
from .workflow import OrderWorkflow


def parse_item_ids(raw: str) -> list[ItemId]:
    """Parse ``"1,2,abc"`` into ``[1, 2, "abc"]``."""
    item_ids: list[ItemId] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        item_ids.append(int(token) if token.isdigit() else token)
    return item_ids


def print_report(workflow: OrderWorkflow) -> None:
    """Print the order summary the way the storefront page lays it out."""
    summary = workflow.summary
    if summary is None:
        return

    print(summary.headline)
    for view in summary.packages:
        print(f"\nPackage {view.number}")
        print(f"  Items: {view.items_display}")
        print(f"  Total weight: {view.weight_display}")
        print(f"  Total price: {view.price_display}")
        print(f"  Courier price: {view.courier_display}")
    print(f"\nTotal Courier Charges: {summary.total_courier_display}")


async def run_order(settings: Settings, item_ids: list[ItemId]) -> int:
    """Load the catalog, select the given ids, submit and print the result."""
    async with OrderWorkflow.from_settings(settings) as workflow:
        await workflow.start()

        if workflow.catalog.error:
            print(f"Error: {workflow.catalog.error}", file=sys.stderr)
        elif not workflow.catalog.items:
            print("No items available")
        else:
            print("Available Items")
            for item in workflow.catalog.items:
                print(f"  [{item.id}] {item.name} - ${item.price} - {item.weight}g")
            print()

        for item_id in item_ids:
            workflow.toggle(item_id)

        status = await workflow.submit()
        if status.is_failed:
            print(f"Error: {status.message}", file=sys.stderr)
            return 1

        print_report(workflow)
        return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Package Order Client - select items and calculate shipment packages"
    )
    parser.add_argument(
        "--mode",
        choices=["order", "http"],
        default="order",
        help="order: submit one order and print it; http: serve the HTTP facade",
    )
    parser.add_argument(
        "--items",
        default="",
        help="Comma-separated item ids to select (order mode only, e.g. 1,2,3)",
    )
    parser.add_argument(
        "--api-url",
        help="Base URL of the order API (default: PACKAGE_ORDER_API_URL or http://localhost:3000/api/v1)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: PACKAGE_ORDER_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="HTTP server host (only for http mode, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP server port (only for http mode, default: 8000)",
    )

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    overrides = {}
    if args.api_url:
        overrides["api_url"] = args.api_url
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})

    logging.basicConfig(level=settings.log_level)

    if args.mode == "http":
        from .http_server import run_http_server

        print(f"Starting Package Order HTTP Server on {args.host}:{args.port}")
        print(f"API documentation available at http://{args.host}:{args.port}/docs")
        run_http_server(host=args.host, port=args.port, settings=settings)
        return

    try:
        exit_code = asyncio.run(run_order(settings, parse_item_ids(args.items)))
    except KeyboardInterrupt:
        print("\nShutting down...", file=sys.stderr)
        exit_code = 0
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

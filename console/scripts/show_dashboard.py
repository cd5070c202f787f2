"""
Print the console dashboard (totals, recent orders, low stock) to the terminal.

Run:
  PYTHONPATH=console python console/scripts/show_dashboard.py --base-url http://localhost:8080/api/v1
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from core.api_client import ApiClient
from core.config import settings
from services import BeerOrderService, BeerService, CustomerService, ShipmentService
from views.dashboard import DashboardView


async def main(base_url: str) -> int:
    async with ApiClient(base_url) as client:
        view = DashboardView(
            BeerService(client),
            CustomerService(client),
            BeerOrderService(client),
            ShipmentService(client),
        )
        await view.load()

    if view.error:
        print(f"Error loading dashboard data: {view.error}", file=sys.stderr)
        return 1

    stats = view.stats
    print(f"Beers: {stats.total_beers}  Customers: {stats.total_customers}  "
          f"Orders: {stats.total_orders}  Shipments: {stats.total_shipments}")

    print("\nRecent orders:")
    if not stats.recent_orders:
        print("  (none)")
    for o in stats.recent_orders:
        created = o.created_date.isoformat() if o.created_date else "-"
        print(f"  #{o.id}  {o.customer_ref:<20} {o.status or '-':<10} {created}")

    print("\nLow stock:")
    if not stats.low_stock_beers:
        print("  (none)")
    for b in stats.low_stock_beers:
        print(f"  {b.beer_name:<30} {b.upc:<14} on hand: {b.quantity_on_hand}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", default=settings.api_base_url, help="Base URL of the beer service API")
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.base_url)))

"""Manual runner for fetching channel listings through the shop client.

Reads SHOP_DOMAIN, SHOP_API_KEY and SHOP_CHANNEL_ID from the environment
(or .env) and prints the models the client returns.

Usage:
    python scripts/fetch_resources.py --type products
    python scripts/fetch_resources.py --type products --id 1
    python scripts/fetch_resources.py --type products --query product_ids=1,2,3
    python scripts/fetch_resources.py --type collections --limit 5
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Dict, List, Optional

# Add the project root to path so the package imports without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from buybutton import Config, ShopClient, settings
from buybutton.models import ResourceModel


def parse_query(pairs: List[str]) -> Dict[str, object]:
    """Parse ``key=value`` pairs; comma-separated values become lists."""
    query: Dict[str, object] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Invalid query parameter '{pair}', expected key=value")
        query[key] = value.split(",") if "," in value else value
    return query


async def fetch_resources(
    resource_type: str,
    resource_id: Optional[str] = None,
    query: Optional[Dict[str, object]] = None,
    limit: int = 10,
) -> int:
    """Fetch resources and display them.

    Args:
        resource_type: Resource type key (e.g., "products")
        resource_id: Fetch a single record when given
        query: Fetch matching records when given
        limit: Maximum number of records to display

    Returns:
        Process exit code
    """
    print(f"\n{'='*70}")
    print(f"  Fetching {resource_type} from {settings.SHOP_DOMAIN or '(SHOP_DOMAIN not set)'}")
    print(f"{'='*70}\n")

    try:
        client = ShopClient(Config.from_settings())

        if resource_id is not None:
            models = [await client.fetch_one(resource_type, resource_id)]
        elif query:
            models = await client.fetch_query(resource_type, query)
        else:
            models = await client.fetch_all(resource_type)

    except Exception as e:
        print(f"Error while fetching {resource_type}:")
        print(f"   {type(e).__name__}: {e}\n")
        return 1

    if not models:
        print("No records found.\n")
        return 0

    for i, model in enumerate(models[:limit], 1):
        _print_model(i, model)

    print(f"{'='*70}")
    print(f"  Total: {len(models)}  Displayed: {min(limit, len(models))}")
    print(f"{'='*70}\n")
    return 0


def _print_model(index: int, model: ResourceModel) -> None:
    print(f"[{index}] {model.title or '(untitled)'}")
    print(f"    id: {model.id}")
    if model.handle:
        print(f"    handle: {model.handle}")
    variants = model.get("variants")
    if variants:
        print(f"    variants: {len(variants)}")
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch shop channel listings")
    parser.add_argument("--type", dest="resource_type", default="products", help="Resource type (products, collections)")
    parser.add_argument("--id", dest="resource_id", help="Fetch a single record by id")
    parser.add_argument("--query", nargs="*", default=[], help="Query parameters as key=value")
    parser.add_argument("--limit", type=int, default=10, help="Maximum records to display")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        query = parse_query(args.query)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    sys.exit(asyncio.run(fetch_resources(args.resource_type, args.resource_id, query, args.limit)))


if __name__ == "__main__":
    main()

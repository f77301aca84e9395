from __future__ import annotations

import logging
import typing as t

import click

from .core.expiry import format_timestamp
from .core.models import CachedOrder, PurchaseRecord
from .core.shop import ShopCaches
from .utils.config import CacheConfig, StorageConfig

STORES = ("orders", "purchases")


def _format_order(idx: int, entry: CachedOrder) -> str:
    order = entry.order
    return (
        f"  [{idx:02d}] {order.id}  status={order.status.value:<10}  "
        f"amount={order.total_amount}  cached={format_timestamp(entry.cached_at)}"
    )


def _format_purchase(idx: int, record: PurchaseRecord) -> str:
    return (
        f"  [{idx:02d}] {record.order_id}  {record.product_name}  "
        f"amount={record.total_amount}  contact={record.customer_contact}  "
        f"purchased={format_timestamp(record.purchase_time)}"
    )


def _when(value: t.Any) -> str:
    return format_timestamp(value) if value is not None else "-"


@click.group()
@click.option(
    "--storage",
    "storage_type",
    type=click.Choice(["file", "redis"], case_sensitive=False),
    default="file",
    help="Backend holding the cache blobs",
)
@click.option("--path", default=".nekoshop", help="Directory for file storage")
@click.option("--redis-url", default="redis://localhost:6379/0", help="Redis URL for redis storage")
@click.option("--prefix", default="nekoshop", help="Redis key prefix")
@click.option(
    "--log-level",
    default="WARNING",
    help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
@click.pass_context
def main(ctx: click.Context, storage_type: str, path: str, redis_url: str, prefix: str, log_level: str) -> None:
    """Inspect and maintain the NekoShop client-local caches."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = CacheConfig(
        storage=StorageConfig(type=storage_type.lower(), path=path, connection_string=redis_url, prefix=prefix)
    )
    if ctx.obj is None:
        ctx.obj = ShopCaches.from_config(config)


@main.command("list")
@click.argument("store", type=click.Choice(STORES))
@click.pass_obj
def list_cmd(caches: ShopCaches, store: str) -> None:
    """Show live entries, most recent first."""
    if store == "orders":
        orders = caches.orders.list()
        if not orders:
            click.echo("No cached orders.")
        for idx, entry in enumerate(orders, start=1):
            click.echo(_format_order(idx, entry))
        return
    records = caches.purchases.list()
    if not records:
        click.echo("No purchase records.")
    for idx, record in enumerate(records, start=1):
        click.echo(_format_purchase(idx, record))


@main.command()
@click.pass_obj
def stats(caches: ShopCaches) -> None:
    """Show entry counts and age range for both caches."""
    o = caches.orders.stats()
    p = caches.purchases.stats()
    click.echo(f"orders:    count={o.count}  oldest={_when(o.oldest)}  newest={_when(o.newest)}")
    click.echo(
        f"purchases: count={p.count}  total={p.total_amount}  oldest={_when(p.oldest)}  newest={_when(p.newest)}"
    )


@main.command()
@click.argument("store", type=click.Choice(STORES))
@click.argument("order_id")
@click.pass_obj
def remove(caches: ShopCaches, store: str, order_id: str) -> None:
    """Drop one entry by order ID."""
    cache = caches.orders if store == "orders" else caches.purchases
    cache.remove(order_id)
    click.echo(f"Removed {order_id} from {store}")


@main.command()
@click.argument("store", type=click.Choice(STORES + ("all",)))
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt")
@click.pass_obj
def clear(caches: ShopCaches, store: str, yes: bool) -> None:
    """Delete a whole cache ('all' clears both)."""
    if not yes:
        click.confirm(f"Clear {store}?", abort=True)
    if store == "all":
        caches.clear_all()
    elif store == "orders":
        caches.orders.clear()
    else:
        caches.purchases.clear()
    click.echo(f"Cleared: {store}")


if __name__ == "__main__":
    main()

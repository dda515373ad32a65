"""Stock bookkeeping at checkout.

Each cart line is an independent atomic `$inc` of `-quantity` on its product.
Lines are applied one at a time in cart order:
- The first failing line aborts the rest
- Lines applied before the failure stay applied (no rollback)
- Stock is not floored at zero
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from app.services.documents import parse_object_id
from app.stores.mongo import products_collection

logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class StockDecrement:
    product_id: str
    quantity: int


@dataclass
class DecrementReport:
    applied_product_ids: list[str] = field(default_factory=list)
    # Well-formed ids that matched no product; a silent no-op, not a failure
    unmatched_product_ids: list[str] = field(default_factory=list)


class QuantityUpdateError(RuntimeError):
    """A cart line failed; carries the progress made before it."""

    def __init__(self, cause: Exception, failed_product_id: str, report: DecrementReport):
        super().__init__(str(cause))
        self.failed_product_id = failed_product_id
        self.report = report


async def decrement_quantities(items: list[StockDecrement]) -> DecrementReport:
    """Decrement stock for each cart line, sequentially.

    Args:
        items: Cart lines in the order they should be applied.

    Returns:
        Report splitting the lines into decremented products and ids that
        matched no product.

    Raises:
        QuantityUpdateError: On the first line that fails (bad id or store
            error). Earlier lines remain committed.
    """
    collection = products_collection()
    report = DecrementReport()

    for item in items:
        try:
            object_id = parse_object_id(item.product_id)
            result = await collection.update_one(
                {"_id": object_id},
                {"$inc": {"quantity": -item.quantity}},
            )
        except Exception as e:
            logger.warning(
                f"Quantity update aborted at {item.product_id!r} after "
                f"{len(report.applied_product_ids)} of {len(items)} lines: {e}"
            )
            raise QuantityUpdateError(e, item.product_id, report) from e
        if result.matched_count:
            report.applied_product_ids.append(item.product_id)
        else:
            logger.info(f"Quantity update skipped unknown product {item.product_id!r}")
            report.unmatched_product_ids.append(item.product_id)

    return report

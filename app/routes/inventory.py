"""Inventory endpoints.

PUT /update-quantities - take checked-out cart lines out of stock
"""

import logging

from fastapi import APIRouter

from app.errors import ApiError
from app.schemas import MessageResponse, UpdateQuantitiesRequest, UpdateQuantitiesResponse
from app.services.inventory import (
    QuantityUpdateError,
    StockDecrement,
    decrement_quantities,
)

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.put(
    "/update-quantities",
    response_model=UpdateQuantitiesResponse,
    responses={
        500: {
            "model": MessageResponse,
            "description": "A cart line failed; progress ids are listed alongside the message",
        },
    },
)
async def update_quantities(request: UpdateQuantitiesRequest) -> UpdateQuantitiesResponse:
    """Decrement stock for every cart line, in order.

    A failing line stops the batch with a 500 that lists the product ids
    already decremented; those are not rolled back. Ids that match no
    product are reported as unmatched and do not fail the batch.
    """
    lines = [
        StockDecrement(product_id=item.product_id, quantity=item.quantity)
        for item in request.items
    ]

    try:
        report = await decrement_quantities(lines)
    except QuantityUpdateError as e:
        raise ApiError(
            500,
            "Failed to update quantities",
            e,
            include_status=False,
            extra={
                "appliedProductIds": e.report.applied_product_ids,
                "unmatchedProductIds": e.report.unmatched_product_ids,
                "failedProductId": e.failed_product_id,
            },
        ) from e
    except Exception as e:
        logger.exception("Failed to update quantities")
        raise ApiError(500, "Failed to update quantities", e, include_status=False) from e

    logger.info(f"Quantities updated for {len(report.applied_product_ids)} cart lines")
    return UpdateQuantitiesResponse(
        message="Quantities updated successfully",
        updated_count=len(report.applied_product_ids),
        unmatched_product_ids=report.unmatched_product_ids,
    )

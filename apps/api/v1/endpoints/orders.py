"""Order read endpoints.

Both routes return the same data: one queries the session directly,
the other goes through the generic repository.
"""

import logging
from typing import Iterable, List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.application.dtos.order_dto import OrderResponse
from core.data.models import Order
from core.domain.repositories import Repository

from apps.api.deps import get_order_repository, get_session
from apps.api.responses import DecimalJSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["orders"])


def _render(orders: Iterable[OrderResponse]) -> DecimalJSONResponse:
    return DecimalJSONResponse(
        content=[order.model_dump(by_alias=True) for order in orders]
    )


@router.get(
    "/ordersdbContext",
    response_model=List[OrderResponse],
    response_class=DecimalJSONResponse,
    name="GetOrdersDbContext",
    operation_id="GetOrdersDbContext",
    summary="List orders through the session",
)
async def get_orders_db_context(
    session: AsyncSession = Depends(get_session),
) -> DecimalJSONResponse:
    """List orders by selecting the projected columns directly.

    Args:
        session: Request-scoped SQLAlchemy session

    Returns:
        JSON array of OrderResponse objects ordered by id
    """
    result = await session.execute(
        select(
            Order.id,
            Order.number,
            Order.total,
            Order.billing_address,
            Order.shipping_address,
        ).order_by(Order.id)
    )
    response = [OrderResponse.from_entity(row) for row in result.all()]

    logger.debug(f"Session path returned {len(response)} order(s)")
    return _render(response)


@router.get(
    "/ordersRepositoryPattern",
    response_model=List[OrderResponse],
    response_class=DecimalJSONResponse,
    name="GetOrdersRepositoryPattern",
    operation_id="GetOrdersRepositoryPattern",
    summary="List orders through the generic repository",
)
async def get_orders_repository_pattern(
    repository: Repository[Order] = Depends(get_order_repository),
) -> DecimalJSONResponse:
    """List orders via ``Repository.get_all``.

    Args:
        repository: Request-scoped order repository

    Returns:
        JSON array of OrderResponse objects ordered by id
    """
    orders = await repository.get_all()
    response = [OrderResponse.from_entity(order) for order in orders]

    logger.debug(f"Repository path returned {len(response)} order(s)")
    return _render(response)

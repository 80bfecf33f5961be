"""
Trading API routes.

Swaps and orders are bookkeeping only: they complete immediately at a
fixed rate or the requested price and no tokens move.
"""

from fastapi import APIRouter, Depends

from comptoir.application.use_cases.list_orders import ListOrders
from comptoir.application.use_cases.place_order import OrderCommand, PlaceOrder
from comptoir.application.use_cases.swap_tokens import SwapCommand, SwapTokens
from comptoir.di.dependencies import get_list_orders, get_place_order, get_swap_tokens
from comptoir.domain.value_objects.token_catalog import SUPPORTED_TOKENS
from comptoir.infrastructure.monitoring import metrics
from comptoir.presentation.schemas.trading_schemas import (
    OrderRequest,
    OrderResponse,
    SwapRequest,
    SwapResponse,
    TokenResponse,
    TokensResponse,
    TransactionResponse,
    TransactionsResponse,
)

router = APIRouter(prefix="/trading", tags=["Trading"])


@router.get("/tokens", response_model=TokensResponse, summary="Token catalog")
async def list_tokens() -> TokensResponse:
    return TokensResponse(
        tokens=[TokenResponse(**token.to_dict()) for token in SUPPORTED_TOKENS]
    )


@router.post("/swap", response_model=SwapResponse, summary="Swap tokens")
async def swap(
    request: SwapRequest,
    use_case: SwapTokens = Depends(get_swap_tokens),
) -> SwapResponse:
    """
    Record a swap.

    Returns 400 unless the wallet is 0x followed by 40 hex digits.
    """
    transaction = await use_case.execute(
        SwapCommand(
            wallet_address=request.wallet_address,
            token_in=request.token_in,
            token_out=request.token_out,
            amount_in=request.amount_in,
        )
    )
    metrics.trades_total.labels(type=transaction.type.value).inc()
    metrics.trading_fees_total.inc(transaction.fee)

    return SwapResponse(
        transaction_id=transaction.id,
        token_in=transaction.token_in,
        token_out=transaction.token_out,
        amount_in=transaction.amount_in,
        amount_out=transaction.amount_out,
        fee=transaction.fee,
        status=transaction.status.value,
    )


@router.post("/orders", response_model=OrderResponse, summary="Place order")
async def place_order(
    request: OrderRequest,
    use_case: PlaceOrder = Depends(get_place_order),
) -> OrderResponse:
    transaction = await use_case.execute(
        OrderCommand(
            wallet_address=request.wallet_address,
            type=request.type,
            token=request.token,
            amount=request.amount,
            price=request.price,
        )
    )
    metrics.trades_total.labels(type=transaction.type.value).inc()
    metrics.trading_fees_total.inc(transaction.fee)

    return OrderResponse(
        order_id=transaction.id,
        type=transaction.type.value,
        token=transaction.token_in,
        amount=transaction.amount_in,
        price=transaction.price,
        fee=transaction.fee,
        status=transaction.status.value,
        message=f"{transaction.type.value} order placed successfully",
    )


@router.get(
    "/orders/{wallet_address}",
    response_model=TransactionsResponse,
    summary="Recent orders",
)
async def list_orders(
    wallet_address: str,
    use_case: ListOrders = Depends(get_list_orders),
) -> TransactionsResponse:
    transactions = await use_case.execute(wallet_address)
    return TransactionsResponse(
        transactions=[TransactionResponse.from_entity(t) for t in transactions]
    )

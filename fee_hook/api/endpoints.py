"""API endpoints for the fee hook service."""

import structlog
from fastapi import APIRouter, Depends

from fee_hook.fees.engine import DEFAULT_FEE_ENGINE, FeeEngine
from fee_hook.models.api import FeePreviewRequest, FeePreviewResponse
from fee_hook.models.params import TradeDirection
from fee_hook.pricing.pool_price import derive_pool_prices
from fee_hook.pricing.reference import normalize_reference_price

logger = structlog.get_logger()

router = APIRouter()


def get_fee_engine() -> FeeEngine:
    """Dependency provider for the fee engine.

    Override this in tests to inject a differently configured engine:
        app.dependency_overrides[get_fee_engine] = lambda: FeeEngine(config)
    """
    return DEFAULT_FEE_ENGINE


@router.post("/fee/preview", response_model_exclude_none=True)
async def preview_fee(
    request: FeePreviewRequest,
    engine: FeeEngine = Depends(get_fee_engine),
) -> FeePreviewResponse:
    """Compute the fee a swap would pay, from explicit pool and feed state.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Price snapshot out of range / invalid decimals: 422
        - Degenerate price or fee overflow: 409
    """
    prices = derive_pool_prices(request.sqrt_price_x96)

    reference_price: int | None = None
    if request.reference is not None:
        reference_price = normalize_reference_price(
            request.reference.answer,
            request.reference.decimals,
            request.target_decimals,
        )

    quote = engine.compute_fee(
        base_fee=request.base_fee,
        override_fee=request.override_fee,
        prices=prices,
        reference_price=reference_price,
        compare_against_token0=request.compare_against_token0,
        direction=TradeDirection.from_zero_for_one(request.zero_for_one),
        multiplier=request.fee_multiplier,
    )

    logger.info(
        "fee_preview",
        fee=quote.fee,
        adjusted=quote.adjusted,
        zero_for_one=request.zero_for_one,
    )

    return FeePreviewResponse(
        fee=quote.fee,
        base_fee=quote.base_fee,
        adjustment=quote.adjustment,
        price0=prices.price0,
        price1=prices.price1,
        reference_price=reference_price,
        adjusted=quote.adjusted,
        skip_reason=quote.skip_reason.value if quote.skip_reason else None,
    )

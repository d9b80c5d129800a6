"""Pydantic models for the fee preview API."""

from pydantic import BaseModel, Field

from fee_hook.constants import (
    DEFAULT_BASE_FEE,
    DEFAULT_FEE_MULTIPLIER,
    MAX_FEE_MULTIPLIER,
    MAX_LP_FEE,
)


class ReferenceQuote(BaseModel):
    """Raw reference feed answer."""

    answer: int
    decimals: int = Field(ge=0, le=77)


class FeePreviewRequest(BaseModel):
    """Inputs for a stateless fee computation."""

    sqrt_price_x96: int = Field(alias="sqrtPriceX96", gt=0)
    zero_for_one: bool = Field(alias="zeroForOne")
    base_fee: int = Field(default=DEFAULT_BASE_FEE, alias="baseFee", ge=0, le=MAX_LP_FEE)
    override_fee: int = Field(default=0, alias="overrideFee", ge=0, le=MAX_LP_FEE)
    fee_multiplier: int = Field(
        default=DEFAULT_FEE_MULTIPLIER, alias="feeMultiplier", ge=0, le=MAX_FEE_MULTIPLIER
    )
    reference: ReferenceQuote | None = None
    target_decimals: int = Field(default=18, alias="targetDecimals", ge=0, le=77)
    compare_against_token0: bool = Field(default=True, alias="compareAgainstToken0")

    model_config = {"populate_by_name": True}


class FeePreviewResponse(BaseModel):
    """Fee computed for a preview request."""

    fee: int
    base_fee: int = Field(serialization_alias="baseFee")
    adjustment: int
    price0: int
    price1: int
    reference_price: int | None = Field(default=None, serialization_alias="referencePrice")
    adjusted: bool
    skip_reason: str | None = Field(default=None, serialization_alias="skipReason")

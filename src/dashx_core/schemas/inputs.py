"""Pydantic models that shape client arguments into DashX GraphQL inputs."""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify(value: Any) -> Any:
    return None if value is None else str(value)


class _GraphQLInput(BaseModel):
    """Base for inputs serialized with their GraphQL (camelCase) names."""

    model_config = ConfigDict(populate_by_name=True)

    def to_input(self) -> dict:
        """Convert to the `input` variable dict, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CartInput(_GraphQLInput):
    """Account reference shared by every cart operation."""

    uid: Optional[Union[str, int]] = Field(None, serialization_alias="accountUid")
    anonymous_uid: Optional[str] = Field(
        None, serialization_alias="accountAnonymousUid"
    )
    order_id: Optional[str] = Field(None, serialization_alias="orderId")

    @field_validator("uid", mode="before")
    @classmethod
    def _uid_as_string(cls, value: Any) -> Any:
        return _stringify(value)


class AddItemToCartInput(CartInput):
    item_id: str = Field(..., serialization_alias="itemId")
    pricing_id: Optional[str] = Field(None, serialization_alias="pricingId")
    quantity: Union[str, int] = Field("1", description="Sent as a Decimal string")
    reset: bool = False
    custom: Optional[dict[str, Any]] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_as_string(cls, value: Any) -> Any:
        return _stringify(value)


class CartCouponInput(CartInput):
    coupon_code: str = Field(..., serialization_alias="couponCode")


class CheckoutCartInput(CartInput):
    gateway: Optional[str] = Field(None, serialization_alias="gatewayIdentifier")
    gateway_options: Optional[dict[str, Any]] = Field(
        None, serialization_alias="gatewayOptions"
    )


class CapturePaymentInput(CartInput):
    gateway_response: dict[str, Any] = Field(
        ..., serialization_alias="gatewayResponse"
    )


class StoredPreferencesInput(_GraphQLInput):
    uid: Union[str, int] = Field(..., serialization_alias="accountUid")
    preference_data: Optional[dict[str, Any]] = Field(
        None, serialization_alias="preferenceData"
    )

    @field_validator("uid", mode="before")
    @classmethod
    def _uid_as_string(cls, value: Any) -> Any:
        return _stringify(value)


class AssetsListQuery(_GraphQLInput):
    """Top-level variables for assetsList (not wrapped in `input`)."""

    filter: Optional[dict[str, Any]] = None
    order: Optional[list[dict[str, Any]]] = None
    limit: Optional[int] = None
    page: Optional[int] = None

"""Typed GraphQL input models."""
from .inputs import (
    AddItemToCartInput,
    AssetsListQuery,
    CapturePaymentInput,
    CartCouponInput,
    CartInput,
    CheckoutCartInput,
    StoredPreferencesInput,
)

__all__ = [
    "AddItemToCartInput",
    "AssetsListQuery",
    "CapturePaymentInput",
    "CartCouponInput",
    "CartInput",
    "CheckoutCartInput",
    "StoredPreferencesInput",
]

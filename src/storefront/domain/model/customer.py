"""CustomerInfo: contact and shipping details captured with an order."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError


@dataclass(frozen=True)
class CustomerInfo:
    """Validated customer details.

    Payment details are optional unless ``require_payment_details`` is
    passed to ``create()``; when supplied they must not be empty.
    """

    name: str
    shipping_address: str
    email_address: str
    payment_details: str | None = None

    @staticmethod
    def create(
        name: str,
        shipping_address: str,
        email_address: str,
        payment_details: str | None = None,
        *,
        require_payment_details: bool = False,
    ) -> CustomerInfo:
        if not name:
            raise ValidationError("Customer name is required")
        if not shipping_address:
            raise ValidationError("Shipping address is required")
        if not email_address:
            raise ValidationError("Email address is required")

        if payment_details is None:
            if require_payment_details:
                raise ValidationError("Payment details are required")
        elif not payment_details:
            raise ValidationError("Payment details cannot be empty")

        return CustomerInfo(
            name=name,
            shipping_address=shipping_address,
            email_address=email_address,
            payment_details=payment_details,
        )

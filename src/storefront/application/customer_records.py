"""Application services: record and list customer details."""

from __future__ import annotations

import structlog

from storefront.application.dto import CustomerDTO
from storefront.domain.model.customer import CustomerInfo
from storefront.domain.repository.customer_repository import CustomerRepository

logger = structlog.get_logger(__name__)


class RecordCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        require_payment_details: bool = False,
    ) -> None:
        self._customer_repo = customer_repo
        self._require_payment_details = require_payment_details

    def handle(
        self,
        name: str,
        shipping_address: str,
        email_address: str,
        payment_details: str | None = None,
    ) -> CustomerInfo:
        """Validate customer details and append them to the store."""
        customer = CustomerInfo.create(
            name,
            shipping_address,
            email_address,
            payment_details,
            require_payment_details=self._require_payment_details,
        )
        self._customer_repo.persist(customer)
        logger.info("customer.recorded", customer=customer.name)
        return customer


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        return [
            CustomerDTO(
                name=record.name,
                shipping_address=record.shipping_address,
                email_address=record.email_address,
                payment_details=record.payment_details or "",
            )
            for record in self._customer_repo.load_all()
        ]

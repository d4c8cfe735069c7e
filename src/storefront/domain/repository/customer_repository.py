"""Abstract repository for CustomerInfo records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import CustomerInfo


class CustomerRepository(ABC):

    @abstractmethod
    def persist(self, record: CustomerInfo) -> None:
        """Append a customer record to the store."""

    @abstractmethod
    def load_all(self) -> list[CustomerInfo]:
        """Return every stored customer record, oldest first."""

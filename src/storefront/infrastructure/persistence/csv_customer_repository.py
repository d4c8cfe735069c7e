"""Delimited-text implementation of CustomerRepository.

File layout: a header line, then one comma-joined row per customer,
appended in the order customers were recorded.
"""

from __future__ import annotations

import csv
from pathlib import Path

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.customer import CustomerInfo
from storefront.domain.repository.customer_repository import CustomerRepository

HEADER = "Name, Shipping Address, Email Address, Credit Card Details"


class CsvCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CustomerRepository interface -----------------------------------------

    def persist(self, record: CustomerInfo) -> None:
        try:
            self._ensure_file()
            with self._file_path.open("a", newline="", encoding="utf-8") as handle:
                csv.writer(handle, lineterminator="\n").writerow(self._to_row(record))
        except OSError as exc:
            raise StorageError(
                f"Cannot save customer information to {self._file_path}: {exc}"
            ) from exc

    def load_all(self) -> list[CustomerInfo]:
        if not self._file_path.exists():
            return []
        try:
            with self._file_path.open(newline="", encoding="utf-8") as handle:
                rows = list(csv.reader(handle))
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise StorageError(
                f"Cannot load customer information from {self._file_path}: {exc}"
            ) from exc

        return [
            self._to_domain(row, line_number)
            for line_number, row in enumerate(rows[1:], start=2)
            if row
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(record: CustomerInfo) -> list[str]:
        return [
            record.name,
            record.shipping_address,
            record.email_address,
            record.payment_details or "",
        ]

    def _to_domain(self, row: list[str], line_number: int) -> CustomerInfo:
        if len(row) != 4:
            raise StorageError(
                f"{self._file_path}:{line_number}: expected 4 columns, got {len(row)}"
            )
        name, address, email, payment = row
        try:
            return CustomerInfo.create(name, address, email, payment or None)
        except ValidationError as exc:
            raise StorageError(f"{self._file_path}:{line_number}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _ensure_file(self) -> None:
        # load_all treats the first row as the header, so an empty file needs one
        if not self._file_path.exists() or self._file_path.stat().st_size == 0:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(HEADER + "\n", encoding="utf-8")

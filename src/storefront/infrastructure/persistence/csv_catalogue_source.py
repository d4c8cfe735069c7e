"""Delimited-text implementation of CatalogueSource.

The file has a header line followed by one item per line:
``name,price[,description]``.  Columns are read by position, so the
header wording is free-form.
"""

from __future__ import annotations

import csv
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import StorageError
from storefront.domain.repository.catalogue_source import CatalogueSource, ItemRecord


class CsvCatalogueSource(CatalogueSource):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load_records(self) -> list[ItemRecord]:
        try:
            with self._file_path.open(newline="", encoding="utf-8") as handle:
                rows = list(csv.reader(handle))
        except FileNotFoundError as exc:
            raise StorageError(f"Catalogue file not found: {self._file_path}") from exc
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise StorageError(f"Cannot read catalogue {self._file_path}: {exc}") from exc

        records: list[ItemRecord] = []
        # Line 1 is the header
        for line_number, row in enumerate(rows[1:], start=2):
            if not any(cell.strip() for cell in row):
                continue
            records.append(self._to_record(row, line_number))
        return records

    def _to_record(self, row: list[str], line_number: int) -> ItemRecord:
        if len(row) not in (2, 3):
            raise StorageError(
                f"{self._file_path}:{line_number}: expected 2 or 3 columns, got {len(row)}"
            )
        name, price = row[0].strip(), row[1].strip()
        description = row[2].strip() if len(row) == 3 else None
        try:
            Decimal(price)
        except InvalidOperation as exc:
            raise StorageError(
                f"{self._file_path}:{line_number}: unparsable price {price!r}"
            ) from exc
        return ItemRecord(name=name, price=price, description=description)

"""JSON-file-backed implementation of CatalogueSource."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import StorageError
from storefront.domain.repository.catalogue_source import CatalogueSource, ItemRecord


class JsonCatalogueSource(CatalogueSource):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load_records(self) -> list[ItemRecord]:
        raw = self._load_raw()
        if not isinstance(raw, list):
            raise StorageError(f"{self._file_path}: expected a list of items")
        return [self._to_record(item, position) for position, item in enumerate(raw, 1)]

    # --- Serialization --------------------------------------------------------

    def _to_record(self, raw: object, position: int) -> ItemRecord:
        if not isinstance(raw, dict) or "name" not in raw or "price" not in raw:
            raise StorageError(
                f"{self._file_path}: item {position} needs 'name' and 'price'"
            )
        name, price = raw["name"], raw["price"]
        description = raw.get("description")
        if not isinstance(name, str):
            raise StorageError(f"{self._file_path}: item {position} name must be text")
        if description is not None and not isinstance(description, str):
            raise StorageError(
                f"{self._file_path}: item {position} description must be text"
            )
        if not _is_price(price):
            raise StorageError(
                f"{self._file_path}: item {position} has unparsable price {price!r}"
            )
        return ItemRecord(name=name, price=price, description=description)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> object:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise StorageError(f"Catalogue file not found: {self._file_path}") from exc
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read catalogue {self._file_path}: {exc}") from exc


def _is_price(value: object) -> bool:
    # bool is an int subclass but never a price
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return False
    try:
        Decimal(str(value).strip())
    except InvalidOperation:
        return False
    return True

"""Application service: Load Catalogue use case.

Turns decoded item records into a validated Catalogue.  A single bad
record fails the whole load; a half-built catalogue is never returned.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from storefront.domain.model.catalogue import Catalogue, CatalogueItem
from storefront.domain.repository.catalogue_source import (
    CatalogueSource,
    ItemRecord,
)

logger = structlog.get_logger(__name__)


def load_catalogue(
    records: Iterable[ItemRecord],
    require_description: bool = False,
) -> Catalogue:
    """Validate every record and build the catalogue from them."""
    items = [
        CatalogueItem.create(
            record.name,
            record.price,
            record.description,
            require_description=require_description,
        )
        for record in records
    ]
    return Catalogue.create(items)


class LoadCatalogueHandler:

    def __init__(
        self,
        source: CatalogueSource,
        require_description: bool = False,
    ) -> None:
        self._source = source
        self._require_description = require_description

    def handle(self) -> Catalogue:
        records = self._source.load_records()
        catalogue = load_catalogue(records, self._require_description)
        logger.info("catalogue.loaded", item_count=len(catalogue))
        return catalogue

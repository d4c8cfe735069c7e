"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.load_catalogue import LoadCatalogueHandler
from storefront.application.session import ShoppingSession
from storefront.domain.model.catalogue import Catalogue
from storefront.domain.repository.catalogue_source import CatalogueSource
from storefront.infrastructure.persistence.csv_catalogue_source import (
    CsvCatalogueSource,
)
from storefront.infrastructure.persistence.csv_customer_repository import (
    CsvCustomerRepository,
)
from storefront.infrastructure.persistence.json_catalogue_source import (
    JsonCatalogueSource,
)
from storefront.infrastructure.settings import StorefrontSettings


def settings() -> StorefrontSettings:
    return StorefrontSettings()


def catalogue_source(config: StorefrontSettings) -> CatalogueSource:
    path = config.catalogue_path
    if path.suffix.lower() == ".json":
        return JsonCatalogueSource(path)
    return CsvCatalogueSource(path)


def customer_repository(config: StorefrontSettings) -> CsvCustomerRepository:
    return CsvCustomerRepository(config.customer_path)


def load_catalogue(config: StorefrontSettings) -> Catalogue:
    handler = LoadCatalogueHandler(
        source=catalogue_source(config),
        require_description=config.require_descriptions,
    )
    return handler.handle()


def new_session(config: StorefrontSettings) -> ShoppingSession:
    return ShoppingSession(
        catalogue=load_catalogue(config),
        customer_repo=customer_repository(config),
    )

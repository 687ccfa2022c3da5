"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers,
and the only place that configures logging handlers.
"""

from __future__ import annotations

import logging

from catalog.application.product_service import ProductService
from catalog.domain.model.product import Clock
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level.upper())


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


def product_service(
    repo: ProductRepository | None = None,
    clock: Clock | None = None,
) -> ProductService:
    return ProductService(repo if repo is not None else product_repository(), clock=clock)

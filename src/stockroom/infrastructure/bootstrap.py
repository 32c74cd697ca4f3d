"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockroom.application.product_store import ProductStore
from stockroom.infrastructure.config import Config
from stockroom.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(Config.DATA_DIR / "products.json")


def product_store() -> ProductStore:
    return ProductStore(product_repo=product_repository())

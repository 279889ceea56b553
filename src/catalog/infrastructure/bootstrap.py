"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.product_service import ProductService
from catalog.config import MEMORY_STORAGE, PRODUCTS_FILE, get_data_dir, get_storage
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)


def product_repository() -> ProductRepository:
    if get_storage() == MEMORY_STORAGE:
        return InMemoryProductRepository()
    return JsonProductRepository(get_data_dir() / PRODUCTS_FILE)


def product_service() -> ProductService:
    return ProductService(product_repo=product_repository())

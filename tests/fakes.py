"""In-memory fake repository for testing.

Reuses the dict-backed repository and additionally records every write,
so tests can check how many times (and with what) the service called
the repository.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)


class FakeProductRepository(InMemoryProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__(products)
        self.created: list[Product] = []
        self.updated: list[Product] = []
        self.deleted: list[Product | None] = []

    def create(self, product: Product) -> None:
        self.created.append(product)
        super().create(product)

    def update(self, product: Product) -> None:
        self.updated.append(product)
        super().update(product)

    def delete(self, product: Product | None) -> None:
        self.deleted.append(product)
        super().delete(product)

    @property
    def write_count(self) -> int:
        return len(self.created) + len(self.updated) + len(self.deleted)

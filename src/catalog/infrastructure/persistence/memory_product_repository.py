"""Dict-backed ProductRepository, kept in process memory.

Useful for demos and as a drop-in when no data directory is wanted.
Iteration order is insertion order.
"""

from __future__ import annotations

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def create(self, product: Product) -> None:
        if product.id in self._store:
            raise ValidationError(f"Product with ID {product.id} already exists")
        self._store[product.id] = product

    def update(self, product: Product) -> None:
        if product.id not in self._store:
            raise ValidationError(f"Product with ID {product.id} does not exist")
        self._store[product.id] = product

    def delete(self, product: Product | None) -> None:
        if product is not None:
            self._store.pop(product.id, None)

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

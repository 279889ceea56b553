"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def create(self, product: Product) -> None:
        products = self._load()
        if product.id in products:
            raise ValidationError(f"Product with ID {product.id} already exists")
        products[product.id] = product
        self._persist(products)
        logger.info("Stored new product %s in %s", product, self._file_path)

    def update(self, product: Product) -> None:
        products = self._load()
        if product.id not in products:
            raise ValidationError(f"Product with ID {product.id} does not exist")
        products[product.id] = product
        self._persist(products)
        logger.info("Updated product %s in %s", product, self._file_path)

    def delete(self, product: Product | None) -> None:
        if product is None:
            return
        products = self._load()
        if products.pop(product.id, None) is not None:
            self._persist(products)
            logger.info("Removed product %s from %s", product, self._file_path)

    def next_id(self) -> int:
        products = self._load()
        return max(products, default=0) + 1

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            int(item["id"]): Product(
                id=int(item["id"]),
                name=item["name"],
                price=Decimal(str(item.get("price") or "0")),
                stock=int(item.get("stock", 0)),
                color=item.get("color", ""),
            )
            for item in raw
        }

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price),
                "stock": p.stock,
                "color": p.color,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

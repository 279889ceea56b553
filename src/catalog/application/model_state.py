"""Model binding and validation for submitted product forms.

The service never validates input itself; it is told whether a
submission is valid. This module produces that answer: it binds raw
input to a candidate Product and records every rule the candidate
breaks. Binding never raises, so an invalid candidate can always be
shown back to the user together with its errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from catalog.domain.model.product import Product


@dataclass
class ModelState:
    """Field-keyed validation errors for one submission."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages(self) -> list[str]:
        """Flatten errors into ``"field: message"`` lines."""
        return [
            f"{name}: {message}"
            for name, messages in self.errors.items()
            for message in messages
        ]


def validate_product(product: Product) -> ModelState:
    """Apply the catalog's validation rules to an already-built Product."""
    state = ModelState()
    if not product.name or not product.name.strip():
        state.add_error("name", "Name is required")
    if product.price < Decimal("0"):
        state.add_error("price", "Price cannot be negative")
    if product.stock < 0:
        state.add_error("stock", "Stock cannot be negative")
    return state


def bind_product(
    *,
    id: int,
    name: str | None,
    price: str | int | float | Decimal | None,
    stock: int | str | None = 0,
    color: str | None = "",
) -> tuple[Product, ModelState]:
    """Bind raw form input to a candidate Product.

    Returns the candidate together with its ModelState. Unparseable
    numbers bind as zero and are reported as errors.
    """
    binding_errors = ModelState()

    try:
        bound_price = Decimal(str(price)) if price not in (None, "") else Decimal("0")
        if not bound_price.is_finite():
            raise InvalidOperation
    except (InvalidOperation, ValueError):
        binding_errors.add_error("price", f"Invalid price: {price!r}")
        bound_price = Decimal("0")

    try:
        bound_stock = int(stock) if stock not in (None, "") else 0
    except (TypeError, ValueError):
        binding_errors.add_error("stock", f"Invalid stock: {stock!r}")
        bound_stock = 0

    product = Product(
        id=id,
        name=(name or "").strip(),
        price=bound_price,
        stock=bound_stock,
        color=(color or "").strip(),
    )

    state = validate_product(product)
    for field_name, messages in binding_errors.errors.items():
        for message in messages:
            state.add_error(field_name, message)
    return product, state

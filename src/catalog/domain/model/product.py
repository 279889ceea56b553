"""Product entity.

Products have no relationships to other entities. They are created from
a client-supplied request, changed only through explicit edits and
removed only through an explicit delete confirmation.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Product:
    """A product in the catalog.

    Deliberately carries no validation of its own: a submitted form may
    bind to an invalid Product that still has to be shown back to the
    user. Validation lives in ``catalog.application.model_state``.
    """

    id: int
    name: str
    price: Decimal = Decimal("0")
    stock: int = 0
    color: str = ""

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"

"""Request outcomes returned by the ProductService.

A closed set of result kinds, consumed by whichever presentation layer
sits on top (the CLI here). Plain containers, like the application DTOs:
they carry data across the layer boundary and hold no behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from catalog.domain.model.product import Product

INDEX_ACTION = "index"


@dataclass(frozen=True)
class ViewWithData:
    """Render a view, optionally with a model (one product or a list)."""

    model: Product | list[Product] | None = None
    view: str | None = None


@dataclass(frozen=True)
class Redirect:
    """Send the caller to another action (always the list action here)."""

    action: str = INDEX_ACTION


@dataclass(frozen=True)
class NotFound:
    status_code: int = 404


Outcome = Union[ViewWithData, Redirect, NotFound]

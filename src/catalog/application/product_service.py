"""Application service: Product request handling.

Each operation turns one logical request into an Outcome. Missing ids,
missing records and invalid submissions are ordinary branches, never
exceptions. Repository failures are not caught here; they propagate to
the caller unchanged.
"""

from __future__ import annotations

import logging

from catalog.application.outcomes import (
    INDEX_ACTION,
    NotFound,
    Outcome,
    Redirect,
    ViewWithData,
)
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    # --- Queries --------------------------------------------------------------

    def list_all(self) -> Outcome:
        products = self._product_repo.list_all()
        logger.debug("Listing %d product(s)", len(products))
        return ViewWithData(model=products, view="index")

    def get_detail(self, product_id: int | None) -> Outcome:
        if product_id is None:
            logger.debug("Detail requested without an id, redirecting")
            return Redirect(INDEX_ACTION)
        return self._view_existing(product_id, view="details")

    # --- Create ---------------------------------------------------------------

    def prepare_create(self) -> Outcome:
        return ViewWithData(view="create")

    def submit_create(self, candidate: Product, model_is_valid: bool) -> Outcome:
        """Create a product from a bound submission.

        An invalid submission is handed back untouched so the form can
        be redisplayed; the repository is not touched in that case.
        """
        if not model_is_valid:
            logger.debug("Rejected invalid create submission for %s", candidate)
            return ViewWithData(model=candidate, view="create")

        self._product_repo.create(candidate)
        logger.debug("Created product %s", candidate)
        return Redirect(INDEX_ACTION)

    # --- Edit -----------------------------------------------------------------

    def prepare_edit(self, product_id: int | None) -> Outcome:
        if product_id is None:
            logger.debug("Edit requested without an id, redirecting")
            return Redirect(INDEX_ACTION)
        return self._view_existing(product_id, view="edit")

    def submit_edit(
        self, route_id: int, candidate: Product, model_is_valid: bool
    ) -> Outcome:
        """Apply an edit submission.

        The id in the route must match the id of the submitted product;
        a mismatch is treated as a request for a product that is not
        there.
        """
        if route_id != candidate.id:
            logger.debug(
                "Edit route id %s does not match product id %s", route_id, candidate.id
            )
            return NotFound()

        if not model_is_valid:
            logger.debug("Rejected invalid edit submission for %s", candidate)
            return ViewWithData(model=candidate, view="edit")

        self._product_repo.update(candidate)
        logger.debug("Updated product %s", candidate)
        return Redirect(INDEX_ACTION)

    # --- Delete ---------------------------------------------------------------

    def prepare_delete(self, product_id: int | None) -> Outcome:
        if product_id is None:
            logger.debug("Delete requested without an id")
            return NotFound()
        return self._view_existing(product_id, view="delete")

    def confirm_delete(self, product_id: int) -> Outcome:
        """Delete whatever the repository resolves for ``product_id``.

        Always redirects to the list; deleting an id that is already gone
        is a no-op at the repository.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.debug("Product #%s already absent at delete confirmation", product_id)
        self._product_repo.delete(product)
        return Redirect(INDEX_ACTION)

    # --- Internal helpers -----------------------------------------------------

    def _view_existing(self, product_id: int, view: str) -> Outcome:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.debug("Product #%s not found", product_id)
            return NotFound()
        return ViewWithData(model=product, view=view)

"""Application service: the product store.

Single entry point for every product operation.  Each call runs under
one lock, loads a copy of the record, lets the Product aggregate apply
its rules, and saves only on success, so a rejected operation leaves
stored state untouched.

Domain exceptions never escape: they come back as ``Err`` results.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from stockroom.application.dto import ProductPayload, StockPayload
from stockroom.application.result import Err, Ok, Result
from stockroom.domain.exceptions import DomainException, EntityNotFoundError
from stockroom.domain.model.product import (
    MAX_ID,
    Product,
    validate_amount,
    validate_details,
)
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductStore:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock
        self._lock = threading.Lock()

    # --- Commands -------------------------------------------------------------

    def add_product(self, payload: ProductPayload) -> Product | None:
        """Create a product from *payload*.

        Returns None when the payload is invalid or no ID is left to
        assign; the reason is logged.
        """
        with self._lock:
            try:
                validate_details(payload.name, payload.quantity, payload.category)
            except DomainException as exc:
                logger.warning("Rejected new product: %s", exc)
                return None

            product_id = self._product_repo.next_id()
            if product_id > MAX_ID:
                logger.error("Product ID space exhausted (next id %d)", product_id)
                return None

            product = Product.create(
                product_id=product_id,
                name=payload.name,
                quantity=payload.quantity,
                category=payload.category,
                now=self._clock(),
            )
            self._product_repo.save(product)

        logger.info(
            "Added product #%d '%s' (%s, quantity=%d)",
            product.id, product.name, product.category.value, product.quantity,
        )
        return product

    def update_product(self, product_id: int, payload: ProductPayload) -> Result[Product]:
        """Replace name, quantity and category of an existing product."""
        try:
            validate_details(payload.name, payload.quantity, payload.category)
        except DomainException as exc:
            return self._reject(exc)
        return self._mutate(
            product_id,
            "update a product",
            lambda p, now: p.update_details(
                payload.name, payload.quantity, payload.category, now
            ),
        )

    def add_quantity(self, product_id: int, payload: StockPayload) -> Result[Product]:
        try:
            validate_amount(payload.amount)
        except DomainException as exc:
            return self._reject(exc)
        return self._mutate(
            product_id,
            "add quantity to product",
            lambda p, now: p.add_stock(payload.amount, now),
        )

    def offload_quantity(self, product_id: int, payload: StockPayload) -> Result[Product]:
        try:
            validate_amount(payload.amount)
        except DomainException as exc:
            return self._reject(exc)
        return self._mutate(
            product_id,
            "offload a product",
            lambda p, now: p.offload_stock(payload.amount, now),
        )

    def remove_product(self, product_id: int) -> Result[Product]:
        with self._lock:
            product = self._product_repo.remove(product_id)
        if product is None:
            return self._reject(
                EntityNotFoundError(
                    f"Couldn't delete a product with id={product_id}. Product not found"
                )
            )
        logger.info("Removed product #%d '%s'", product.id, product.name)
        return Ok(product)

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: int) -> Result[Product]:
        with self._lock:
            product = self._product_repo.get_by_id(product_id)
        if product is None:
            return Err(self._not_found(product_id))
        logger.debug("Read product #%d", product_id)
        return Ok(product)

    def get_stock(self, product_id: int) -> Result[int]:
        result = self.get_product(product_id)
        if isinstance(result, Err):
            return result
        return Ok(result.value.quantity)

    def list_products(self) -> list[Product]:
        with self._lock:
            return self._product_repo.list_all()

    # --- Internal helpers -----------------------------------------------------

    def _mutate(
        self,
        product_id: int,
        action_name: str,
        action: Callable[[Product, int], None],
    ) -> Result[Product]:
        with self._lock:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                return self._reject(
                    EntityNotFoundError(
                        f"Couldn't {action_name} with id={product_id}. "
                        f"Product not found"
                    )
                )
            try:
                action(product, self._clock())
            except DomainException as exc:
                return self._reject(exc)
            self._product_repo.save(product)

        logger.info(
            "Product #%d: %s, quantity=%d", product.id, action_name, product.quantity
        )
        return Ok(product)

    @staticmethod
    def _reject(exc: DomainException) -> Err:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return Err(exc)

    @staticmethod
    def _not_found(product_id: int) -> EntityNotFoundError:
        return EntityNotFoundError(f"A product with id={product_id} was not found")

"""Product aggregate.

A product is a single inventory record: what it is called, which
category it belongs to, and how many units are in stock.  All stock
rules are enforced here; the store only loads, mutates and saves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stockroom.domain.exceptions import InvalidOperationError

# ---------------------------------------------------------------------------
# Numeric bounds (unsigned 32-bit quantities, unsigned 64-bit ids)
# ---------------------------------------------------------------------------
MAX_QUANTITY = 2**32 - 1
MAX_ID = 2**64 - 1


class Category(Enum):
    CAKE = "Cake"
    COOKIES = "Cookies"
    BAKERY = "Bakery"


@dataclass
class Product:
    """Aggregate root for an inventory record.

    Use ``Product.create()`` for new products; it validates the
    details.  The ``__init__`` stays simple so repositories can
    reconstitute stored records without re-validating.

    Invariants:
    - ``quantity`` stays within ``0..MAX_QUANTITY``
    - ``created_at`` never changes after creation
    - ``updated_at`` is None until the first successful mutation
    """

    id: int
    name: str
    quantity: int
    category: Category
    created_at: int
    updated_at: int | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: int,
        name: str,
        quantity: int,
        category: Category,
        now: int,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        validate_details(name, quantity, category)
        return Product(
            id=product_id,
            name=name,
            quantity=quantity,
            category=category,
            created_at=now,
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self, name: str, quantity: int, category: Category, now: int
    ) -> None:
        """Replace name, quantity and category; id and created_at are kept."""
        validate_details(name, quantity, category)
        self.name = name
        self.quantity = quantity
        self.category = category
        self.updated_at = now

    def add_stock(self, amount: int, now: int) -> None:
        """Increase stock by *amount* units."""
        validate_amount(amount)
        if self.quantity + amount > MAX_QUANTITY:
            raise InvalidOperationError(
                f"Cannot add {amount} to product with id={self.id}: "
                f"quantity would exceed {MAX_QUANTITY}"
            )
        self.quantity += amount
        self.updated_at = now

    def offload_stock(self, amount: int, now: int) -> None:
        """Decrease stock by *amount* units (sale or write-off)."""
        validate_amount(amount)
        if self.quantity == 0:
            raise InvalidOperationError(
                f"Product with id={self.id} cannot be offloaded "
                f"because the quantity is 0"
            )
        if amount > self.quantity:
            raise InvalidOperationError(
                f"Cannot offload more than available quantity. "
                f"Available: {self.quantity}, Trying to offload: {amount}"
            )
        self.quantity -= amount
        self.updated_at = now


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


def validate_details(name: str, quantity: int, category: Category) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidOperationError("Product name cannot be empty.")
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise InvalidOperationError(
            f"Product quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity <= 0:
        raise InvalidOperationError("Product quantity must be greater than zero.")
    if quantity > MAX_QUANTITY:
        raise InvalidOperationError(
            f"Product quantity cannot exceed {MAX_QUANTITY}."
        )
    if not isinstance(category, Category):
        raise InvalidOperationError(f"Unknown product category: {category!r}")


def validate_amount(amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidOperationError(
            f"Stock amount must be an integer, got {type(amount).__name__}"
        )
    if amount <= 0:
        raise InvalidOperationError("Stock amount must be greater than zero.")
    if amount > MAX_QUANTITY:
        raise InvalidOperationError(f"Stock amount cannot exceed {MAX_QUANTITY}.")

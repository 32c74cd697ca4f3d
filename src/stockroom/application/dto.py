"""Data Transfer Objects: plain containers that cross layer boundaries.

Payloads carry caller-supplied fields only; ids and timestamps are
always assigned by the store.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.product import Category


@dataclass(frozen=True)
class ProductPayload:
    """Input: fields for creating or replacing a product."""

    name: str
    quantity: int
    category: Category = Category.BAKERY


@dataclass(frozen=True)
class StockPayload:
    """Input: number of units to add or offload."""

    amount: int

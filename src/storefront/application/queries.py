"""Queries: intents to read state, each handled by exactly one handler."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetProductQuery:
    product_id: str


@dataclass(frozen=True)
class ListProductsQuery:
    skip: int | None = None
    take: int | None = None


@dataclass(frozen=True)
class GetOrderQuery:
    order_id: str


@dataclass(frozen=True)
class ListOrdersQuery:
    skip: int | None = None
    take: int | None = None

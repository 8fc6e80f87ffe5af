"""Run one async unit of work from a synchronous click command."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import click
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.exceptions import DomainException, StoreError
from storefront.infrastructure.bootstrap import session_scope

T = TypeVar("T")


def run(work: Callable[[AsyncSession], Awaitable[T]]) -> T:
    """Open a session, await ``work(session)`` and close everything.

    Domain and store errors become a ClickException, so the user sees a
    one-line ``Error: ...`` and exit code 1 instead of a traceback.
    """

    async def _main() -> T:
        async with session_scope() as session:
            return await work(session)

    try:
        return asyncio.run(_main())
    except (DomainException, StoreError) as exc:
        raise click.ClickException(str(exc))

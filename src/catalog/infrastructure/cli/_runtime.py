"""Glue between synchronous click commands and the async catalog."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from catalog.application.products_manager import ProductsManager
from catalog.domain.exceptions import DomainException, ValidationError
from catalog.infrastructure.bootstrap import Container, build
from catalog.infrastructure.settings import Settings

T = TypeVar("T")


def run(settings: Settings, action: Callable[[Container], Awaitable[T]]) -> T:
    """Build the container, await ``action`` on it, then dispose the engine.

    Domain errors are re-raised as ``click.ClickException``.
    """

    async def _main() -> T:
        container = build(settings)
        try:
            return await action(container)
        finally:
            await container.dispose()

    try:
        return asyncio.run(_main())
    except ValidationError as exc:
        details = "".join(f"\n  - {error}" for error in exc.errors)
        raise click.ClickException(f"{exc}{details}")
    except DomainException as exc:
        raise click.ClickException(str(exc))


def run_manager(settings: Settings, action: Callable[[ProductsManager], Awaitable[T]]) -> T:
    return run(settings, lambda container: action(container.products_manager))

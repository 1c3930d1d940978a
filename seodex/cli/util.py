"""Helpers shared by CLI commands."""

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import logfire
from dishka import AsyncContainer

from seodex.application.di import create_container
from seodex.config import Config, configure_logging

T = TypeVar("T")


def run_in_uow(fn: Callable[[AsyncContainer], Awaitable[T]]) -> T:
    """Run fn inside a fresh unit of work; the session commits when fn returns."""

    async def _main() -> Any:
        config = Config()
        configure_logging(config.logging)
        # Spans are exported only when LOGFIRE_TOKEN is set
        logfire.configure(send_to_logfire="if-token-present", console=False)
        container = create_container(config)
        try:
            async with container() as uow:
                return await fn(uow)
        finally:
            await container.close()

    return asyncio.run(_main())

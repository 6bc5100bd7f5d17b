"""Helpers for running independent fallible operations side by side."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def settle(label: str, operation: Awaitable[T], default: T) -> T:
    """Await ``operation`` and return ``default`` if it raises.

    The failure is logged under ``label``. Cancellation is never swallowed.
    """
    try:
        return await operation
    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.warning("%s failed, continuing without it: %s", label, e)
        return default


async def gather_settled(*operations: tuple[str, Awaitable[T], T]) -> list[T]:
    """Run labelled operations concurrently and collect their results.

    Each entry is ``(label, awaitable, default)``. Results come back in the
    order given; a failed operation contributes its default instead of
    failing the whole batch.
    """
    return list(
        await asyncio.gather(
            *(settle(label, operation, default) for label, operation, default in operations)
        )
    )

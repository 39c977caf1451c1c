"""Correlation ids for evaluation log events."""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

_run_id_ctx: ContextVar[Optional[str]] = ContextVar("siconvert_run_id", default=None)


@contextmanager
def run_scope(run_id: Optional[str] = None) -> Iterator[str]:
    """Bind ``run_id`` (a fresh uuid when omitted) for the enclosed evaluations."""

    value = run_id or str(uuid.uuid4())
    token = _run_id_ctx.set(value)
    try:
        yield value
    finally:
        _run_id_ctx.reset(token)


def current_run_id() -> Optional[str]:
    return _run_id_ctx.get()


def log_event(message: str, **extra: object) -> None:
    """Log ``message`` at INFO with the active run id in ``record.payload``."""

    payload = {"run_id": current_run_id(), **extra}
    logger.info(message, extra={"payload": payload})

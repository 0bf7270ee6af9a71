# ABOUTME: Logger helpers: structlog logger lookup, bound context managers and a step-timing decorator
# ABOUTME: Every pipeline log line carries the document or run it belongs to

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

F = TypeVar("F", bound=Callable[..., Any])

ROOT_LOGGER_NAME = "qa_corpus"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, named after the package when ``name`` is omitted."""
    return structlog.get_logger(name or ROOT_LOGGER_NAME)


def new_run_id() -> str:
    """Short random id that ties together the log lines of one import run."""
    return uuid.uuid4().hex[:8]


def log_pipeline_step(step_name: str) -> Callable[[F], F]:
    """Log start, finish (with elapsed time and item count) or failure of a step.

    Args:
        step_name: Name recorded in the ``step`` field of each event
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            # Bound per call so events use the logging setup active at run time
            step_logger = get_logger(func.__module__).bind(step=step_name)
            step_logger.debug("Step started")
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                step_logger.error(
                    "Step failed",
                    elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

            items = len(result) if hasattr(result, "__len__") else None
            step_logger.info(
                "Step finished",
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
                items=items,
            )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


class LogContext:
    """Binds context onto a logger for the duration of a ``with`` block.

    An exception escaping the block is logged once with that context and re-raised.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound: structlog.stdlib.BoundLogger | None = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound = self.logger.bind(**self.context)
        return self.bound

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound is not None:
            self.bound.error("Operation aborted", error=str(exc_val), error_type=exc_type.__name__)


def with_document_context(document: str) -> LogContext:
    """Logging context for work on one source document."""
    return LogContext(get_logger("qa_corpus.documents"), document=document)


def with_pipeline_context(pipeline_name: str, **context) -> LogContext:
    """Logging context for one whole pipeline run, tagged with a fresh run id."""
    return LogContext(get_logger(ROOT_LOGGER_NAME), pipeline=pipeline_name, run_id=new_run_id(), **context)

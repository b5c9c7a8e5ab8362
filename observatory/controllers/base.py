"""Error normalization shared by the controllers."""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..errors import ControllerError, OperationFailed

logger = logging.getLogger(__name__)


@contextmanager
def failure_scope(operation: str, prefix: Optional[str] = None) -> Iterator[None]:
    """Report anything raised inside the block as a failure of ``operation``.

    Controller errors raised for the same operation pass through untouched;
    those coming from a delegated operation are relabeled, and any other
    exception is wrapped in :class:`OperationFailed`.
    """

    try:
        yield
    except ControllerError as exc:
        if exc.operation == operation:
            raise
        raise exc.relabel(operation, prefix) from exc.cause
    except Exception as exc:
        logger.error("Error in %s: %s", operation, exc)
        raise OperationFailed.wrap(operation, exc, prefix) from exc

"""BaseService: shared foundation for the operation services.

Every service receives a :class:`GraphTable` at construction time and
returns :class:`ServiceResult`. Expected failures from the table or the
store are converted into structured errors here, in one place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from dynagraph.infrastructure.csv_source import ImportFormatError
from dynagraph.infrastructure.store import StoreError, TableExistsError, TableNotFoundError
from dynagraph.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from dynagraph.services.table import GraphTable

logger = logging.getLogger(__name__)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


class BaseService:
    """Base for service-layer classes bound to one graph table.

    Usage::

        class EdgeService(BaseService):
            def put_edge(self, ...) -> ServiceResult:
                try:
                    self._table.put(record)
                except StoreError as exc:
                    return self._failure("put_edge", exc)
    """

    def __init__(self, table: GraphTable) -> None:
        self._table = table

    def _missing_table(self, op: str) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="NOT_FOUND",
                message=f"Could not locate table '{self._table.name}'",
                detail={"table": self._table.name},
            ),
        )

    def _failure(self, op: str, exc: Exception, **detail: Any) -> ServiceResult:
        """Map an expected exception to a failed ServiceResult."""
        if isinstance(exc, ValidationError):
            code, message = "VALIDATION", _validation_message(exc)
        elif isinstance(exc, TableNotFoundError):
            code, message = "NOT_FOUND", str(exc)
        elif isinstance(exc, TableExistsError):
            code, message = "ALREADY_EXISTS", str(exc)
        elif isinstance(exc, StoreError):
            code, message = "STORE_ERROR", str(exc)
            if exc.code:
                detail.setdefault("store_code", exc.code)
        elif isinstance(exc, (ImportFormatError, OSError)):
            code, message = "INVALID_INPUT", str(exc)
        else:
            raise exc

        logger.debug("%s failed with %s: %s", op, code, message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=code,
                message=message,
                detail={"table": self._table.name, **detail},
            ),
        )

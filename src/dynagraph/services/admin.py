"""TableAdminService: status, init and drop for the graph table."""

from __future__ import annotations

from dynagraph.infrastructure.store import StoreError
from dynagraph.services.base import BaseService
from dynagraph.services.result import ServiceResult
from dynagraph.services.telemetry import traced


class TableAdminService(BaseService):
    """Table lifecycle operations returning ServiceResult."""

    @traced
    def status(self) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="table_status",
            data={"table": self._table.name, "exists": self._table.exists()},
        )

    @traced
    def init_table(self, *, replace: bool = False) -> ServiceResult:
        """Create the graph table.

        If the table already exists it is dropped and recreated when
        *replace* is set; otherwise it is left untouched and the result
        carries a warning.
        """
        op = "init_table"
        name = self._table.name
        existed = self._table.exists()

        if existed and not replace:
            return ServiceResult(
                ok=True,
                op=op,
                data={"table": name, "created": False, "replaced": False},
                warnings=[f"Table '{name}' already exists; left unchanged"],
            )

        try:
            if existed:
                self._table.delete()
            self._table.create()
        except StoreError as exc:
            return self._failure(op, exc, replaced=existed)

        return ServiceResult(
            ok=True,
            op=op,
            data={"table": name, "created": True, "replaced": existed},
        )

    @traced
    def drop_table(self) -> ServiceResult:
        op = "drop_table"
        try:
            self._table.delete()
        except StoreError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"table": self._table.name, "deleted": True})

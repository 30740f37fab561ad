"""BaseError – common ancestor of every mp-populator error."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Error carrying a stable ``code`` plus structured ``detail``.

    Subclasses set ``default_code`` (``configuration_error``,
    ``object_generation_error`` and so on). Pass *cause* to chain the
    exception that made population fail; it becomes ``__cause__``.
    """

    default_code: str = "populator_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail``, plus the cause's repr when chained."""
        payload = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]

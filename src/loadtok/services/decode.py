"""Decode input strings against registered type expressions."""

from __future__ import annotations

import logging
import time
from typing import Any

import structlog

from loadtok.domain.capability import describe
from loadtok.domain.errors import DecodeError
from loadtok.domain.registry import TypeExpressionError
from loadtok.domain.samples import DEMO_SCENARIOS
from loadtok.domain.stream import TokenStream, tokenize
from loadtok.services._helpers import render_value, to_plain
from loadtok.services.base import BaseService
from loadtok.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class DecodeService(BaseService):
    """Decode, demo, and type-listing operations."""

    def decode(
        self,
        text: str,
        type_expr: str,
        *,
        delimiter: str | None = None,
        op: str = "decode",
    ) -> ServiceResult:
        """Decode *text* as *type_expr*.

        Trailing tokens left after a successful decode are reported as a
        warning; the count-prefixed framing makes them legal.
        """
        try:
            capability = self._registry.resolve(type_expr)
        except TypeExpressionError as exc:
            return ServiceResult.failure(op, "INVALID_TYPE", str(exc), type=type_expr)
        except KeyError as exc:
            return ServiceResult.failure(op, "UNKNOWN_TYPE", exc.args[0], type=type_expr)

        sep = self.delimiter if delimiter is None else delimiter
        try:
            stream = TokenStream(tokenize(text, sep))
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_DELIMITER", str(exc))

        start = time.perf_counter()
        try:
            value = capability.decode(stream)
        except DecodeError as exc:
            self._log_event(
                "decode.failed",
                type=describe(capability),
                code=exc.code,
                position=exc.position,
            )
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError.from_decode_error(exc),
            )
        except (TypeError, ValueError) as exc:
            # Record factories from plugins that reject their declared fields
            self._log_event("decode.failed", type=describe(capability), code="BUILD_FAILED")
            return ServiceResult.failure(
                op,
                "BUILD_FAILED",
                f"Failed to build {describe(capability)} value: {exc}",
                type=describe(capability),
            )
        duration_ms = round((time.perf_counter() - start) * 1000, 3)

        self._log_event(
            "decode.complete",
            type=describe(capability),
            consumed=stream.position,
            remaining=stream.remaining,
            duration_ms=duration_ms,
        )

        warnings: list[str] = []
        if stream.remaining:
            warnings.append(
                f"{stream.remaining} trailing token(s) left unconsumed after position "
                f"{stream.position}"
            )
        meta = {"duration_ms": duration_ms} if self._settings.verbose else None
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": describe(capability),
                "value": to_plain(value),
                "rendered": render_value(value),
                "consumed": stream.position,
                "remaining": stream.remaining,
            },
            warnings=warnings,
            meta=meta,
        )

    def demo(self) -> ServiceResult:
        """Decode every sample scenario; fail on the first one that fails."""
        items: list[dict[str, Any]] = []
        for label, text, type_expr in DEMO_SCENARIOS:
            result = self.decode(text, type_expr, delimiter="/", op="demo")
            if not result.ok:
                return result
            items.append(
                {
                    "label": label,
                    "input": text,
                    "type": result.data["type"],
                    "value": result.data["value"],
                    "rendered": result.data["rendered"],
                }
            )
        logger.debug("Ran %d demo scenarios", len(items))
        return ServiceResult(ok=True, op="demo", data={"count": len(items), "items": items})

    def list_types(self) -> ServiceResult:
        """List every registered type name with its capability."""
        items = [
            {"name": name, "capability": repr(self._registry.get(name))}
            for name in self._registry.names()
        ]
        return ServiceResult(ok=True, op="types", data={"count": len(items), "items": items})

    def _log_event(self, event: str, **fields: Any) -> None:
        """Emit a structured decode event. Only active with --verbose."""
        if not self._settings.verbose:
            return
        structlog.get_logger("loadtok.decode").debug(event, **fields)

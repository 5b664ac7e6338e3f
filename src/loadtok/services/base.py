"""BaseService — shared foundation for loadtok services.

Every service receives the settings and a populated capability registry
at construction time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loadtok.config.settings import LoadtokSettings
    from loadtok.domain.registry import CapabilityRegistry


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DecodeService(BaseService):
            def decode(self, text: str, type_expr: str) -> ServiceResult:
                capability = self._registry.resolve(type_expr)
                ...
    """

    def __init__(self, settings: LoadtokSettings, registry: CapabilityRegistry) -> None:
        self._settings = settings
        self._registry = registry

    @property
    def delimiter(self) -> str:
        return self._settings.decode.delimiter

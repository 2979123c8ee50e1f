"""Exception types raised by annorder."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


class AnnorderError(RuntimeError):
    """Base class for errors raised outside of ordinary diagnostics."""


class CatalogConfigError(AnnorderError):
    """A canonical ordering cannot be used to rank annotations.

    Raised while a catalog is being built, never while declarations are
    being checked. ``kind`` names the offending ordering and ``names`` holds
    the annotation names that made it unusable (duplicates, blanks).
    """

    def __init__(
        self,
        message: str,
        *,
        kind: str = "",
        names: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.names = names


class NeverRaise(RuntimeError):
    """Sentinel exception for code paths that must be unreachable."""

    def __init__(self, message: str, *, env: Mapping[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.env = MappingProxyType(dict(env or {}))

    @property
    def env_dict(self) -> dict[str, object]:
        return {key: self.env[key] for key in sorted(self.env)}


class NeverThrown(NeverRaise):
    """Alias for NeverRaise used by the explicit never() marker."""

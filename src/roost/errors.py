"""Roost exception hierarchy.

Path resolution itself never raises: every configuration defect is reported
as a :class:`~roost.diagnostics.Diagnostic`.  These types exist for the
places that opt into failing loudly (``RouterConfig(strict=True)``, the CLI).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roost.diagnostics import Diagnostic


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when a declaration tree is misconfigured and strict mode is on.

    Carries the diagnostics that triggered it so callers can inspect them
    instead of parsing the message.
    """

    def __init__(self, message: str, diagnostics: tuple[Diagnostic, ...] = ()) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics

    @classmethod
    def from_diagnostics(cls, diagnostics: tuple[Diagnostic, ...]) -> ConfigurationError:
        lines = [f"{len(diagnostics)} route configuration error(s):"]
        lines.extend(f"  - {d.message}" for d in diagnostics)
        return cls("\n".join(lines), diagnostics)

"""Exception hierarchy shared by the geometry, export and HTTP layers.

ConfigurationError and DomainError subclass ValueError so callers that
already catch ValueError for bad parameters keep working.
"""

from __future__ import annotations


class WingsError(Exception):
    """Base class for every error raised by the wings package."""


class ConfigurationError(WingsError, ValueError):
    """A provider is missing a capability or a count/option is unusable."""


class DomainError(WingsError, ValueError):
    """A chordwise or spanwise query parameter lies outside [0, 1]."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name}={value!r} is outside the valid range [0, 1]")


class GeometryError(WingsError):
    """The mesh contains a triangle whose normal is undefined."""


def check_unit_interval(name: str, value: float) -> float:
    """Return ``value`` unchanged, raising DomainError if it is outside [0, 1]."""
    if not 0.0 <= value <= 1.0:
        raise DomainError(name, value)
    return value

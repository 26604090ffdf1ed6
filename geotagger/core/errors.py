"""
GeoTagger - Exception Hierarchy
===============================
Every failure the core reports is raised from this module so the API layer
can map it to a response with one handler.

Hierarchy::

    GeoTaggerError                      <- catch-all base
    ├── InputValidationError            <- caller passed unusable input (422)
    │   └── DegenerateRangeError        <- color range with max <= min
    ├── NotFoundError                   <- unknown record id (404)
    │   ├── FolderNotFoundError
    │   └── NoteNotFoundError
    ├── ConflictError                   <- state does not allow the action (409)
    ├── LocationError                   <- location feed failure (503)
    ├── PersistenceError                <- folder store read/write failure (500)
    └── SatelliteFetchError             <- transient raster fetch failure (503)
"""

from __future__ import annotations

from enum import Enum


class GeoTaggerError(Exception):
    """Base exception for the package.

    Args:
        message: Human-readable description of the error.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(GeoTaggerError):
    """Raised when an operation receives input it cannot work with."""

    status_code = 422


class DegenerateRangeError(InputValidationError):
    """Raised when a value range has ``vmax <= vmin``.

    Example::

        raise DegenerateRangeError(0.5, 0.5)
    """

    def __init__(self, vmin: float, vmax: float) -> None:
        super().__init__(
            f"Degenerate value range [{vmin}, {vmax}]: max must be greater than min."
        )
        self.vmin: float = vmin
        self.vmax: float = vmax


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class NotFoundError(GeoTaggerError):
    status_code = 404


class FolderNotFoundError(NotFoundError):
    def __init__(self, folder_id: str) -> None:
        super().__init__(f"Folder '{folder_id}' not found.")
        self.folder_id: str = folder_id


class NoteNotFoundError(NotFoundError):
    def __init__(self, folder_id: str, note_id: str) -> None:
        super().__init__(f"Note '{note_id}' not found in folder '{folder_id}'.")
        self.folder_id: str = folder_id
        self.note_id: str = note_id


class ConflictError(GeoTaggerError):
    status_code = 409


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


class LocationErrorKind(str, Enum):
    UNSUPPORTED = "unsupported"
    PERMISSION_DENIED = "permission-denied"
    UNAVAILABLE = "unavailable"
    TIMEOUT = "timeout"


class LocationError(GeoTaggerError):
    """Raised (or delivered to a feed subscriber) when a location update fails.

    Args:
        kind: One of the closed set of :class:`LocationErrorKind` values.
        message: Optional detail from the location source.
    """

    status_code = 503

    def __init__(self, kind: LocationErrorKind | str, message: str | None = None) -> None:
        kind = LocationErrorKind(kind)
        super().__init__(message or f"Location update failed: {kind.value}")
        self.kind: LocationErrorKind = kind


class PersistenceError(GeoTaggerError):
    """Raised when the folder store cannot be read or written."""


class SatelliteFetchError(GeoTaggerError):
    """Raised when a raster fetch fails. Transient: callers may retry."""

    status_code = 503

"""Errors raised while loading track files."""


class TrackError(Exception):
    """Base class for track loading failures shown to the user."""


class TrackParseError(TrackError, ValueError):
    """The document cannot be parsed at all (malformed XML, unknown format)."""


class NoTrackPointsError(TrackError):
    """The document parsed but yielded zero usable track points."""

    def __init__(self, message: str = "No track points found."):
        super().__init__(message)

"""Exceptions raised by the dispatch engine and the city model."""


class DispatchError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(DispatchError, ValueError):
    """A solver was handed input it refuses to work on (e.g. too many stops)."""


class EmptyRosterError(DispatchError):
    """A non-empty batch was dispatched with no firefighters hired."""


class DispatchInProgressError(DispatchError):
    """dispatch() was re-entered on an engine that is still dispatching."""


class FireproofBuildingError(DispatchError, ValueError):
    """Tried to set fire to a building that cannot burn (the fire station)."""


class OutOfCityError(DispatchError, ValueError):
    """A position lies outside the city grid."""

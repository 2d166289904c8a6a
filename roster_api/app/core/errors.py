"""Exceptions raised by the dataset and service layers.

Handlers in ``api.endpoints`` translate these into HTTP responses;
nothing below the API layer knows about status codes.
"""


class RosterError(Exception):
    """Base class for roster lookup failures."""


class DatasetLoadError(RosterError):
    """The dataset file could not be read or is not valid JSON."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(detail)
        self.path = path
        self.detail = detail


class UnitNotFoundError(RosterError):
    """No record in the dataset carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No unit found with name: {name}")
        self.name = name

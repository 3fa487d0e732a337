from dataclasses import dataclass


class TunnelError(Exception):
    """Base class for pitch tunnel matrix errors."""


class UnknownPitchTypeError(TunnelError):
    """Raised when a pitch tag is not in the pitch type catalog."""

    def __init__(self, tag: object) -> None:
        super().__init__(f"Unknown pitch type: {tag!r}")
        self.tag = tag


class InvalidArsenalError(TunnelError):
    """Raised when an arsenal declaration breaks its contract (duplicates, skill range)."""


class RosterConfigError(TunnelError):
    """Raised when a roster file is invalid or missing."""


@dataclass(frozen=True)
class ArsenalRejection:
    player_id: int
    name: str
    message: str

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from pitch_tunnel_matrix.domain.errors import UnknownPitchTypeError


class PitchType(StrEnum):
    FOUR_SEAM = "FF"
    SLIDER = "SL"
    CURVEBALL = "CB"
    CHANGEUP = "CH"
    CUTTER = "CT"
    SINKER = "SI"
    SPLITTER = "SP"
    KNUCKLEBALL = "KN"


@dataclass(frozen=True)
class PitchTypeInfo:
    pitch_type: PitchType
    label: str
    avg_velocity: float  # mph
    vertical_break: float  # inches, positive = rise
    horizontal_break: float  # inches, positive = arm-side
    release_height: float  # feet above mound


def _info(
    pitch_type: PitchType, label: str, velo: float, vert: float, horiz: float, release: float
) -> tuple[PitchType, PitchTypeInfo]:
    return pitch_type, PitchTypeInfo(pitch_type, label, velo, vert, horiz, release)


PITCH_CATALOG: MappingProxyType[PitchType, PitchTypeInfo] = MappingProxyType(
    dict(
        [
            _info(PitchType.FOUR_SEAM, "4-Seam FB", 94.5, 15.2, -7.8, 5.9),
            _info(PitchType.SLIDER, "Slider", 85.3, 1.8, 2.4, 5.8),
            _info(PitchType.CURVEBALL, "Curveball", 79.1, -7.5, 6.1, 5.7),
            _info(PitchType.CHANGEUP, "Changeup", 86.2, 10.1, -14.2, 5.8),
            _info(PitchType.CUTTER, "Cutter", 89.8, 7.4, -1.2, 5.9),
            _info(PitchType.SINKER, "Sinker", 93.1, 7.0, -14.8, 5.8),
            _info(PitchType.SPLITTER, "Splitter", 87.4, 3.2, -10.6, 5.8),
            _info(PitchType.KNUCKLEBALL, "Knuckleball", 78.0, 8.5, -0.5, 5.6),
        ]
    )
)


def parse_pitch_type(tag: PitchType | str) -> PitchType:
    """Resolve a tag such as ``"FF"`` or ``"sl"`` to its PitchType.

    Raises:
        UnknownPitchTypeError: If the tag is not one of the catalog's pitch types.
    """
    if isinstance(tag, PitchType):
        return tag
    try:
        return PitchType(str(tag).strip().upper())
    except ValueError:
        raise UnknownPitchTypeError(tag) from None


def lookup_pitch_type(tag: PitchType | str) -> PitchTypeInfo:
    return PITCH_CATALOG[parse_pitch_type(tag)]

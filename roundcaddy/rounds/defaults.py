"""Default course layout and hole-entry templates."""

from __future__ import annotations

from typing import List, Sequence

from roundcaddy.sg.schemas import HoleEntryData

# Standard 18 holes with a typical par configuration (par 72).
DEFAULT_COURSE_PARS: tuple[int, ...] = (
    4, 4, 3, 5, 4, 4, 3, 4, 5,
    4, 4, 3, 5, 4, 4, 3, 4, 5,
)  # fmt: skip

CLUBS: tuple[str, ...] = (
    "Driver",
    "3 Wood",
    "5 Wood",
    "7 Wood",
    "Hybrid",
    "2 Iron",
    "3 Iron",
    "4 Iron",
    "5 Iron",
    "6 Iron",
    "7 Iron",
    "8 Iron",
    "9 Iron",
    "PW",
    "GW",
    "SW",
    "LW",
    "Putter",
)


def create_default_hole_data(hole_number: int, par: int = 4) -> HoleEntryData:
    """Blank entry for a hole: scored at par with two putts."""

    return HoleEntryData(
        hole_number=hole_number,
        par=par,
        score=par,
        putts=2,
        fairway_hit=None if par == 3 else False,
        gir=False,
        penalties=0,
        tee_club=None if par == 3 else "Driver",
    )


def default_round_entries(
    pars: Sequence[int] = DEFAULT_COURSE_PARS,
) -> List[HoleEntryData]:
    return [
        create_default_hole_data(number, par) for number, par in enumerate(pars, 1)
    ]


__all__ = [
    "CLUBS",
    "DEFAULT_COURSE_PARS",
    "create_default_hole_data",
    "default_round_entries",
]

from .defaults import (
    CLUBS,
    DEFAULT_COURSE_PARS,
    create_default_hole_data,
    default_round_entries,
)

__all__ = [
    "CLUBS",
    "DEFAULT_COURSE_PARS",
    "create_default_hole_data",
    "default_round_entries",
]

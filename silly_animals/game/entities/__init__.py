from .bestiary import (
    Bestiary,
    CreatureTemplate,
    DEFAULT_BESTIARY_PATH,
    load_bestiary,
    parse_bestiary,
)

__all__ = [
    "Bestiary",
    "CreatureTemplate",
    "DEFAULT_BESTIARY_PATH",
    "load_bestiary",
    "parse_bestiary",
]

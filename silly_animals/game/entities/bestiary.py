"""Creature templates and team lineups.

This module loads the bestiary, the fixed table of creature stats, from a
YAML file and turns it into templates that spawn fresh creatures. The
lineup section says which slice of the bestiary each side fields.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

import yaml

from ...core.data import Side
from ...core.entities import Creature, CreatureClass, Roster

DEFAULT_BESTIARY_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "assets", "data", "creatures", "bestiary.yaml"
)

DEFAULT_LINEUP = {
    Side.LEFT: (0, 5),
    Side.RIGHT: (5, 5),
}


@dataclass(frozen=True)
class CreatureTemplate:
    """Initial stats for one kind of creature."""

    creature_class: CreatureClass
    health: int
    attack: int

    @property
    def name(self) -> str:
        return self.creature_class.name

    def spawn(self) -> Creature:
        """Create a new creature with its own identifier."""
        return Creature(self.creature_class, self.health, self.attack)


class Bestiary:
    """Ordered creature templates plus the default team lineup."""

    def __init__(
        self,
        templates: list[CreatureTemplate],
        lineup: Optional[dict[Side, tuple[int, int]]] = None
    ):
        self.templates = list(templates)
        self.lineup_slices = dict(lineup or DEFAULT_LINEUP)

    def __len__(self) -> int:
        return len(self.templates)

    def get(self, name: str) -> CreatureTemplate:
        """Get a template by creature name (case-insensitive).

        Raises:
            KeyError: If no creature has that name
        """
        for template in self.templates:
            if template.name.lower() == name.lower():
                return template
        raise KeyError(f"No creature named {name!r} in bestiary")

    def slice(self, skip: int, take: int) -> list[CreatureTemplate]:
        return self.templates[skip:skip + take]

    def lineup(self, side: Side) -> list[CreatureTemplate]:
        skip, take = self.lineup_slices[side]
        return self.slice(skip, take)

    def build_roster(self, side: Side) -> Roster:
        return Roster.from_templates(side, self.lineup(side))


def _parse_template(entry: Any, index: int, source: str) -> CreatureTemplate:
    if not isinstance(entry, dict):
        raise ValueError(f"Creature #{index} in {source} must be a mapping")

    try:
        name = str(entry["name"])
        icon = str(entry["icon"])
        health = entry["health"]
        attack = entry["attack"]
    except KeyError as e:
        raise KeyError(f"Creature #{index} in {source} is missing {e}")

    for stat_name, value in (("health", health), ("attack", attack)):
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Creature {name!r} in {source}: {stat_name} must be an integer, got {value!r}")

    return CreatureTemplate(CreatureClass(name=name, icon=icon), health, attack)


def _parse_lineup(data: Any, source: str) -> dict[Side, tuple[int, int]]:
    if data is None:
        return dict(DEFAULT_LINEUP)
    if not isinstance(data, dict):
        raise ValueError(f"Lineup in {source} must be a mapping")

    lineup = dict(DEFAULT_LINEUP)
    for side_name, window in data.items():
        try:
            side = Side[str(side_name).upper()]
        except KeyError:
            raise ValueError(f"Unknown lineup side {side_name!r} in {source}")
        if not isinstance(window, dict):
            raise ValueError(f"Lineup for {side_name!r} in {source} must be a mapping")
        default_skip, default_take = DEFAULT_LINEUP[side]
        skip = window.get("skip", default_skip)
        take = window.get("take", default_take)
        for value in (skip, take):
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"Lineup for {side_name!r} in {source} needs non-negative integer skip/take")
        lineup[side] = (skip, take)
    return lineup


def parse_bestiary(data: Any, source: str = "<memory>") -> Bestiary:
    """Build a bestiary from already-loaded YAML data."""
    if not isinstance(data, dict) or "creatures" not in data:
        raise KeyError(f"Invalid bestiary structure in {source}: missing 'creatures'")

    entries = data["creatures"]
    if not isinstance(entries, list):
        raise ValueError(f"'creatures' in {source} must be a list")

    templates = [_parse_template(entry, index, source) for index, entry in enumerate(entries)]
    return Bestiary(templates, _parse_lineup(data.get("lineup"), source))


def load_bestiary(path: Optional[str] = None) -> Bestiary:
    """Load the bestiary from a YAML file.

    Args:
        path: YAML file to read; defaults to the bundled bestiary

    Returns:
        Bestiary with templates in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or a stat is invalid
        KeyError: If required keys are missing
    """
    yaml_path = path or DEFAULT_BESTIARY_PATH

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Bestiary file not found: {yaml_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse bestiary YAML {yaml_path}: {e}")

    return parse_bestiary(data, yaml_path)

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class InputType(Enum):
    KEY_PRESS = auto()
    QUIT = auto()


class Key(Enum):
    ENTER = auto()
    SPACE = auto()
    ESCAPE = auto()

    D = auto()
    Q = auto()
    S = auto()

    UNKNOWN = auto()


@dataclass
class InputEvent:
    event_type: InputType
    key: Optional[Key] = None

    @classmethod
    def key_press(cls, key: Key) -> "InputEvent":
        return cls(InputType.KEY_PRESS, key)

    @classmethod
    def quit(cls) -> "InputEvent":
        return cls(InputType.QUIT)


# Line-based input: what the player types before pressing enter
LINE_KEYS = {
    "": Key.ENTER,
    " ": Key.SPACE,
    "d": Key.D,
    "q": Key.Q,
    "s": Key.S,
}


def parse_line(line: str) -> InputEvent:
    """Map one line of terminal input to an input event."""
    text = line.rstrip("\r\n")
    key = LINE_KEYS.get(text if text == " " else text.strip().lower(), Key.UNKNOWN)
    if key is Key.Q:
        return InputEvent.quit()
    return InputEvent.key_press(key)

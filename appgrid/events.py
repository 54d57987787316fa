from __future__ import annotations

from typing import Callable

import pydantic

from appgrid.entry import Entry


class Event(pydantic.BaseModel):
    def __str__(self) -> str:
        return f"{self.__class__.__name__}"


class Activate(Event):
    """The user clicked an entry on the active page"""

    entry: Entry


class DragRequested(Event):
    """A long press asked the host to start dragging a copy of entry"""

    entry: Entry


class Zoomed(Event):
    degree: float

    def __str__(self) -> str:
        return f"Zoomed({self.degree:.3f})"


class BringToFront(Event):
    pass


class StartAnimation(Event):
    fade_in: bool


class Hidden(Event):
    pass


Listener = Callable[[Event], None]


def ignore(event: Event) -> None:
    pass

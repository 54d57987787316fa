"""
Zoom state of the grid.

The degree runs from 0.0 (hidden) to 1.0 (shown and opaque); values in between
mean the grid is partially shown while an animation runs. Animations belong to
the host: when one is requested the state waits for on_animation_end().
"""
import enum
import logging

from appgrid import events
from appgrid.defaults import VISIBLE_THRESHOLD

logger = logging.getLogger(__name__)


class Visibility(enum.Enum):
    HIDDEN = "hidden"
    TRANSITIONING = "transitioning"
    VISIBLE = "visible"


class ZoomState:
    def __init__(self, listener: events.Listener = events.ignore):
        self.listener = listener
        self.degree = 0.0
        self.is_animating = False

    @property
    def is_visible(self) -> bool:
        return self.degree > VISIBLE_THRESHOLD

    @property
    def visibility(self) -> Visibility:
        if self.degree <= 0.0:
            return Visibility.HIDDEN
        elif self.degree >= 1.0:
            return Visibility.VISIBLE
        return Visibility.TRANSITIONING

    def _set_degree(self, degree: float) -> None:
        self.degree = degree
        self.listener(events.Zoomed(degree=degree))

    def zoom(self, degree: float, animate: bool = False) -> None:
        self._set_degree(min(1.0, max(0.0, degree)))

        if self.is_visible:
            self.listener(events.BringToFront())

        if animate:
            self.is_animating = True
            self.listener(events.StartAnimation(fade_in=self.is_visible))
        else:
            self.on_animation_end()

    def on_animation_end(self) -> None:
        self.is_animating = False
        if not self.is_visible:
            self._set_degree(0.0)
            self.listener(events.Hidden())
        else:
            self._set_degree(1.0)
        logger.debug("Zoom settled at %s", self.visibility.value)

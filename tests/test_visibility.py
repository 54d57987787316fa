import unittest

from appgrid import events
from appgrid.visibility import Visibility, ZoomState


class TestZoomState(unittest.TestCase):

    def setUp(self):
        self.events = []
        self.state = ZoomState(self.events.append)

    def test_starts_hidden(self):
        self.assertEqual(self.state.visibility, Visibility.HIDDEN)
        self.assertFalse(self.state.is_visible)
        self.assertFalse(self.state.is_animating)

    def test_show_without_animation(self):
        self.state.zoom(1.0)
        self.assertEqual(self.state.visibility, Visibility.VISIBLE)
        self.assertEqual(self.events, [
            events.Zoomed(degree=1.0),
            events.BringToFront(),
            events.Zoomed(degree=1.0),
        ])

    def test_animated_show_pins_to_one(self):
        self.state.zoom(0.4, animate=True)
        self.assertEqual(self.state.visibility, Visibility.TRANSITIONING)
        self.assertTrue(self.state.is_visible)
        self.assertTrue(self.state.is_animating)
        self.assertEqual(self.events, [
            events.Zoomed(degree=0.4),
            events.BringToFront(),
            events.StartAnimation(fade_in=True),
        ])

        self.state.on_animation_end()
        self.assertFalse(self.state.is_animating)
        self.assertEqual(self.state.degree, 1.0)
        self.assertEqual(self.events[-1], events.Zoomed(degree=1.0))

    def test_animated_hide_resets_to_zero(self):
        self.state.zoom(1.0)
        del self.events[:]

        self.state.zoom(0.0005, animate=True)
        self.assertFalse(self.state.is_visible)
        self.assertEqual(self.events, [
            events.Zoomed(degree=0.0005),
            events.StartAnimation(fade_in=False),
        ])

        self.state.on_animation_end()
        self.assertEqual(self.state.degree, 0.0)
        self.assertEqual(self.state.visibility, Visibility.HIDDEN)
        self.assertEqual(self.events[-2:], [events.Zoomed(degree=0.0), events.Hidden()])

    def test_degree_is_clamped(self):
        self.state.zoom(3.0, animate=True)
        self.assertEqual(self.state.degree, 1.0)
        self.state.zoom(-1.0, animate=True)
        self.assertEqual(self.state.degree, 0.0)

    def test_default_listener(self):
        state = ZoomState()
        state.zoom(1.0)
        self.assertTrue(state.is_visible)
        self.assertEqual(str(events.Zoomed(degree=0.5)), "Zoomed(0.500)")

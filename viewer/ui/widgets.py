"""
Floodwave Viewer - UI Widgets

Button and slider widgets for the sidebar.
"""

from typing import Callable, Optional

import pygame
from pygame import Rect, Surface

from ..core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_DISABLED,
    COLOR_BUTTON_HOVER,
    COLOR_GRID,
    COLOR_SLIDER_KNOB,
    COLOR_SLIDER_TRACK,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
)


class Button:
    """Simple button widget."""

    def __init__(
        self,
        rect: Rect,
        text: str,
        callback: Callable[[], None],
        background_color: Optional[tuple[int, int, int]] = None,
    ):
        self.rect = rect
        self.text = text
        self.callback = callback
        self.background_color = background_color
        self.hovered = False
        self.active = False
        self.enabled = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.enabled and self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        if not self.enabled:
            color = COLOR_BUTTON_DISABLED
        elif self.background_color is not None:
            color = self.background_color
        elif self.active:
            color = COLOR_BUTTON_ACTIVE
        else:
            color = COLOR_BUTTON_HOVER if self.hovered else COLOR_BUTTON
        pygame.draw.rect(screen, color, self.rect)

        border = COLOR_TEXT if (self.active or self.hovered) and self.enabled else COLOR_GRID
        pygame.draw.rect(screen, border, self.rect, 2 if self.active else 1)

        if self.text:
            text_color = COLOR_TEXT if self.enabled else COLOR_TEXT_DIM
            text_surf = font.render(self.text, True, text_color)
            text_rect = text_surf.get_rect(center=self.rect.center)
            screen.blit(text_surf, text_rect)


class Slider:
    """Horizontal slider over an integer range with a fixed step."""

    def __init__(
        self,
        rect: Rect,
        label: str,
        minimum: int,
        maximum: int,
        step: int,
        value: int,
        on_change: Callable[[int], None],
        unit: str = "",
    ):
        self.rect = rect
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self.value = value
        self.on_change = on_change
        self.unit = unit
        self.enabled = True
        self.dragging = False

    def value_at(self, x: int) -> int:
        """Slider value for a screen x coordinate, snapped to step."""
        if self.rect.width <= 0:
            return self.minimum
        fraction = (x - self.rect.x) / self.rect.width
        fraction = min(max(fraction, 0.0), 1.0)
        raw = self.minimum + fraction * (self.maximum - self.minimum)
        snapped = self.minimum + round((raw - self.minimum) / self.step) * self.step
        return min(max(snapped, self.minimum), self.maximum)

    def _set_from_x(self, x: int):
        new_value = self.value_at(x)
        if new_value != self.value:
            self.value = new_value
            self.on_change(new_value)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            self.dragging = False
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.inflate(0, 12).collidepoint(event.pos):
                self.dragging = True
                self._set_from_x(event.pos[0])
                return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self._set_from_x(event.pos[0])
            return True
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        label = font.render(f"{self.label}: {self.value}{self.unit}", True,
                            COLOR_TEXT if self.enabled else COLOR_TEXT_DIM)
        screen.blit(label, (self.rect.x, self.rect.y - 18))

        track = Rect(self.rect.x, self.rect.centery - 2, self.rect.width, 4)
        pygame.draw.rect(screen, COLOR_SLIDER_TRACK, track)

        span = max(1, self.maximum - self.minimum)
        knob_x = self.rect.x + int((self.value - self.minimum) / span * self.rect.width)
        pygame.draw.circle(screen, COLOR_SLIDER_KNOB, (knob_x, self.rect.centery), 7)

"""
Draw context used by element hooks and the debug overlay.

The element tree never draws on its own: hooks receive whatever surface
the host passes to `Element.draw`. The debug overlay needs only the two
primitives of `DrawSurface`; `UIRenderer` is a pygame implementation
that also covers what the presets draw.

Usage:
    renderer = UIRenderer(screen)
    root.draw(navigator, renderer)
    root.draw_debug(navigator, renderer)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

import pygame

from navui.ui.theme import Color


# Which attribute of the text rect is pinned to x for each alignment
_TEXT_ANCHORS = {
    "left": "left",
    "center": "centerx",
    "right": "right",
}


@runtime_checkable
class DrawSurface(Protocol):
    """Minimal host drawing primitives."""

    def set_color(self, color: Color) -> None:
        ...

    def draw_rect_outline(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Optional[Color] = None,
        thickness: int = 1,
    ) -> None:
        ...


@dataclass(frozen=True)
class FontConfig:
    """Font settings; also the font cache key."""
    name: Optional[str] = None  # None = pygame default
    size: int = 16
    bold: bool = False


def _is_translucent(color: Color) -> bool:
    return len(color) == 4 and color[3] < 255


def _to_rect(x: float, y: float, width: float, height: float) -> pygame.Rect:
    return pygame.Rect(int(x), int(y), int(width), int(height))


class UIRenderer:
    """
    pygame draw context for element trees.

    Keeps a current colour like an immediate-mode canvas: every primitive
    takes an optional colour and falls back to the one last given to
    `set_color`. Translucent fills go through a temporary SRCALPHA
    surface because pygame.draw ignores alpha.
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.color: Color = (255, 255, 255)
        self._fonts: dict[FontConfig, pygame.font.Font] = {}

    def set_surface(self, surface: pygame.Surface) -> None:
        """Retarget drawing, e.g. to an offscreen menu layer."""
        self.surface = surface

    def set_color(self, color: Color) -> None:
        self.color = color

    def _resolve(self, color: Optional[Color]) -> Color:
        return self.color if color is None else color

    def get_font(self, config: Optional[FontConfig] = None) -> pygame.font.Font:
        """Return a cached font, loading it on first use."""
        config = config or FontConfig()
        font = self._fonts.get(config)
        if font is None:
            if config.name:
                font = pygame.font.Font(config.name, config.size)
            else:
                font = pygame.font.SysFont(None, config.size)
            font.set_bold(config.bold)
            self._fonts[config] = font
        return font

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Optional[Color] = None,
    ) -> None:
        """Fill a rect. Empty or inverted rects draw nothing."""
        if width <= 0 or height <= 0:
            return

        color = self._resolve(color)
        rect = _to_rect(x, y, width, height)

        if _is_translucent(color):
            layer = pygame.Surface(rect.size, pygame.SRCALPHA)
            layer.fill(color)
            self.surface.blit(layer, rect.topleft)
        else:
            pygame.draw.rect(self.surface, color[:3], rect)

    def draw_rect_outline(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Optional[Color] = None,
        thickness: int = 1,
    ) -> None:
        """Stroke a rect's border, inside its bounds."""
        pygame.draw.rect(
            self.surface,
            self._resolve(color)[:3],
            _to_rect(x, y, width, height),
            thickness,
        )

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Optional[Color] = None,
        font_config: Optional[FontConfig] = None,
        align: str = "left",
    ) -> pygame.Rect:
        """
        Draw one line of text with its top at y.

        Args:
            align: "left", "center" or "right"; which edge of the text
                sits at x

        Returns:
            Screen rect covered by the text
        """
        color = self._resolve(color)
        rendered = self.get_font(font_config).render(text, True, color[:3])
        if _is_translucent(color):
            rendered.set_alpha(color[3])

        bounds = rendered.get_rect()
        setattr(bounds, _TEXT_ANCHORS.get(align, "left"), int(x))
        bounds.top = int(y)

        self.surface.blit(rendered, bounds)
        return bounds

    def draw_surface(
        self,
        source: pygame.Surface,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        """Blit an image, scaled to width x height when both are given."""
        if width and height:
            source = pygame.transform.scale(source, (int(width), int(height)))
        self.surface.blit(source, (int(x), int(y)))

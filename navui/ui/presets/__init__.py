"""
Reference widget presets.

Each preset builds a plain Element and installs hooks on it; none of
them subclass Element.

- make_button: Click on confirm release
- make_toggle: Flip on confirm press
- make_slider: Left/right and cursor drag adjust a value
- make_hstack / make_vstack: Lay children end to end
- make_image: Draw a surface scaled to fit
"""

from navui.ui.presets.button import make_button
from navui.ui.presets.toggle import make_toggle, set_toggle
from navui.ui.presets.slider import make_slider, set_slider, slider_ratio
from navui.ui.presets.stack import make_hstack, make_vstack
from navui.ui.presets.image import make_image, fit_scale

__all__ = [
    "make_button",
    "make_toggle",
    "set_toggle",
    "make_slider",
    "set_slider",
    "slider_ratio",
    "make_hstack",
    "make_vstack",
    "make_image",
    "fit_scale",
]

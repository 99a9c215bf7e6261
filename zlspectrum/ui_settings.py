"""Interface settings stored as plain parameter values."""

from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field

from .parameters import (
    COLOUR_DEFAULTS,
    COLOUR_MAP_1_IDX,
    COLOUR_MAP_2_IDX,
    COLOUR_NAMES,
    DRAG_FINE_SENSITIVITY,
    DRAG_SENSITIVITY,
    FFT_EXTRA_SPEED,
    FFT_EXTRA_TILT,
    FONT_MODE,
    FONT_SCALE,
    ROTARY_DRAG_SENSITIVITY,
    ROTARY_STYLE,
    SINGLE_EQ_CURVE_THICKNESS,
    SLIDER_DOUBLE_CLICK_FUNC,
    STATIC_FONT_SIZE,
    SUM_EQ_CURVE_THICKNESS,
    TARGET_REFRESH_SPEED,
    TOOLTIP_LANG,
    WHEEL_FINE_SENSITIVITY,
    WHEEL_SENSITIVITY,
    WHEEL_SHIFT_REVERSE,
)


def _round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)


@dataclass(frozen=True)
class Colour:
    """An 8-bit RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for component in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component {component} is outside 0..255")

    @classmethod
    def from_float_alpha(cls, red: int, green: int, blue: int, alpha: float) -> Colour:
        """Build a colour whose opacity is given in 0..1 (clamped)."""
        clamped = min(max(alpha, 0.0), 1.0)
        return cls(red, green, blue, _round_half_away(clamped * 255.0))

    @property
    def float_alpha(self) -> float:
        return self.alpha / 255.0


def _default_colours() -> list[Colour]:
    return [Colour.from_float_alpha(d.r, d.g, d.b, d.opacity) for d in COLOUR_DEFAULTS]


def _default_sensitivities() -> list[float]:
    return [WHEEL_SENSITIVITY.default, WHEEL_FINE_SENSITIVITY.default,
            DRAG_SENSITIVITY.default, DRAG_FINE_SENSITIVITY.default]


@dataclass
class UISettings:
    """Colours, fonts and input behaviour of the interface.

    ``wheel_sensitivity`` holds, in order, the wheel, fine wheel, drag and
    fine drag sensitivities.
    """

    custom_colours: list[Colour] = field(default_factory=_default_colours)
    font_mode: int = FONT_MODE.default_index
    font_scale: float = FONT_SCALE.default
    static_font_size: float = STATIC_FONT_SIZE.default
    wheel_sensitivity: list[float] = field(default_factory=_default_sensitivities)
    is_mouse_wheel_shift_reverse: bool = bool(WHEEL_SHIFT_REVERSE.default_index)
    rotary_style_id: int = ROTARY_STYLE.default_index
    rotary_drag_sensitivity: float = ROTARY_DRAG_SENSITIVITY.default
    is_slider_double_click_open_editor: bool = bool(SLIDER_DOUBLE_CLICK_FUNC.default_index)
    refresh_rate_id: int = TARGET_REFRESH_SPEED.default_index
    fft_extra_tilt: float = FFT_EXTRA_TILT.default
    fft_extra_speed: float = FFT_EXTRA_SPEED.default
    single_eq_curve_thickness: float = SINGLE_EQ_CURVE_THICKNESS.default
    sum_eq_curve_thickness: float = SUM_EQ_CURVE_THICKNESS.default
    tooltip_lang_id: int = TOOLTIP_LANG.default_index
    colour_map1_idx: int = COLOUR_MAP_1_IDX.default_index
    colour_map2_idx: int = COLOUR_MAP_2_IDX.default_index

    def load(self, state: Mapping[str, float]) -> None:
        """Read every setting from parameter values keyed by id."""
        self.custom_colours = [
            Colour.from_float_alpha(
                _round_half_away(state[f"{name}_r"]),
                _round_half_away(state[f"{name}_g"]),
                _round_half_away(state[f"{name}_b"]),
                state[f"{name}_o"],
            )
            for name in COLOUR_NAMES
        ]
        self.font_mode = _round_half_away(state[FONT_MODE.id])
        self.font_scale = float(state[FONT_SCALE.id])
        self.static_font_size = float(state[STATIC_FONT_SIZE.id])
        self.wheel_sensitivity = [
            float(state[WHEEL_SENSITIVITY.id]),
            float(state[WHEEL_FINE_SENSITIVITY.id]),
            float(state[DRAG_SENSITIVITY.id]),
            float(state[DRAG_FINE_SENSITIVITY.id]),
        ]
        self.is_mouse_wheel_shift_reverse = state[WHEEL_SHIFT_REVERSE.id] > 0.5
        self.rotary_style_id = _round_half_away(state[ROTARY_STYLE.id])
        self.rotary_drag_sensitivity = float(state[ROTARY_DRAG_SENSITIVITY.id])
        self.is_slider_double_click_open_editor = state[SLIDER_DOUBLE_CLICK_FUNC.id] > 0.5
        self.refresh_rate_id = _round_half_away(state[TARGET_REFRESH_SPEED.id])
        self.fft_extra_tilt = float(state[FFT_EXTRA_TILT.id])
        self.fft_extra_speed = float(state[FFT_EXTRA_SPEED.id])
        self.single_eq_curve_thickness = float(state[SINGLE_EQ_CURVE_THICKNESS.id])
        self.sum_eq_curve_thickness = float(state[SUM_EQ_CURVE_THICKNESS.id])
        self.tooltip_lang_id = _round_half_away(state[TOOLTIP_LANG.id])
        self.colour_map1_idx = _round_half_away(state[COLOUR_MAP_1_IDX.id])
        self.colour_map2_idx = _round_half_away(state[COLOUR_MAP_2_IDX.id])

    def save(self, state: MutableMapping[str, float]) -> None:
        """Write every setting into parameter values keyed by id."""
        for name, colour in zip(COLOUR_NAMES, self.custom_colours):
            state[f"{name}_r"] = float(colour.red)
            state[f"{name}_g"] = float(colour.green)
            state[f"{name}_b"] = float(colour.blue)
            state[f"{name}_o"] = colour.float_alpha
        state[FONT_MODE.id] = float(self.font_mode)
        state[FONT_SCALE.id] = self.font_scale
        state[STATIC_FONT_SIZE.id] = self.static_font_size
        state[WHEEL_SENSITIVITY.id] = self.wheel_sensitivity[0]
        state[WHEEL_FINE_SENSITIVITY.id] = self.wheel_sensitivity[1]
        state[DRAG_SENSITIVITY.id] = self.wheel_sensitivity[2]
        state[DRAG_FINE_SENSITIVITY.id] = self.wheel_sensitivity[3]
        state[WHEEL_SHIFT_REVERSE.id] = float(self.is_mouse_wheel_shift_reverse)
        state[ROTARY_STYLE.id] = float(self.rotary_style_id)
        state[ROTARY_DRAG_SENSITIVITY.id] = self.rotary_drag_sensitivity
        state[SLIDER_DOUBLE_CLICK_FUNC.id] = float(self.is_slider_double_click_open_editor)
        state[TARGET_REFRESH_SPEED.id] = float(self.refresh_rate_id)
        state[FFT_EXTRA_TILT.id] = self.fft_extra_tilt
        state[FFT_EXTRA_SPEED.id] = self.fft_extra_speed
        state[SINGLE_EQ_CURVE_THICKNESS.id] = self.single_eq_curve_thickness
        state[SUM_EQ_CURVE_THICKNESS.id] = self.sum_eq_curve_thickness
        state[TOOLTIP_LANG.id] = float(self.tooltip_lang_id)
        state[COLOUR_MAP_1_IDX.id] = float(self.colour_map1_idx)
        state[COLOUR_MAP_2_IDX.id] = float(self.colour_map2_idx)
"""Definitions of the plug-in's parameters and their default layouts."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from enum import IntEnum

VERSION_HINT = 1
BAND_NUM = 24


@dataclass(frozen=True)
class NormalisableRange:
    """A value range that maps onto 0..1, optionally skewed and stepped."""

    start: float
    end: float
    interval: float = 0.0
    skew: float = 1.0

    def __post_init__(self) -> None:
        if not self.end > self.start:
            raise ValueError("range end must be greater than its start")
        if self.interval < 0:
            raise ValueError("interval must not be negative")
        if self.skew <= 0:
            raise ValueError("skew must be positive")

    def convert_to_0to1(self, x: float) -> float:
        """Map a value in the range onto 0..1, clamping values outside it."""
        proportion = min(max((x - self.start) / (self.end - self.start), 0.0), 1.0)
        if self.skew == 1.0:
            return proportion
        return proportion ** self.skew

    def convert_from_0to1(self, proportion: float) -> float:
        """Map a proportion in 0..1 back onto the range."""
        proportion = min(max(proportion, 0.0), 1.0)
        if self.skew != 1.0 and proportion > 0.0:
            proportion = math.exp(math.log(proportion) / self.skew)
        return self.start + (self.end - self.start) * proportion

    def snap_to_legal_value(self, x: float) -> float:
        """Round to the nearest step of the interval and clamp to the range."""
        if self.interval > 0:
            x = self.start + self.interval * math.floor((x - self.start) / self.interval + 0.5)
        return min(max(x, self.start), self.end)


@dataclass(frozen=True, kw_only=True)
class Parameter:
    """Common attributes of every parameter."""

    id: str
    name: str = ""
    label: str = ""
    automatable: bool = True
    meta: bool = False
    version_hint: int = VERSION_HINT

    @property
    def default_value(self) -> float:
        """The default as the plain float a parameter state stores."""
        raise NotImplementedError

    def create(self, suffix: str = "", meta: bool = False, automate: bool = True):
        """A copy whose id and name carry ``suffix``, labelled with the bare name."""
        return replace(self, id=self.id + suffix, name=self.name + suffix,
                       label=self.name, meta=meta, automatable=automate)


@dataclass(frozen=True, kw_only=True)
class FloatParameter(Parameter):
    """A continuous parameter."""

    range: NormalisableRange
    default: float

    def __post_init__(self) -> None:
        if not self.range.start <= self.default <= self.range.end:
            raise ValueError(f"default {self.default} of {self.id!r} lies outside its range")

    @property
    def default_value(self) -> float:
        return float(self.default)

    def convert_to_01(self, x: float) -> float:
        return self.range.convert_to_0to1(x)

    def create(self, suffix: str = "", meta: bool = False, automate: bool = True) -> FloatParameter:
        return super().create(suffix, meta, automate)


@dataclass(frozen=True, kw_only=True)
class BoolParameter(Parameter):
    """An on/off parameter."""

    default: bool

    @property
    def default_value(self) -> float:
        return 1.0 if self.default else 0.0

    def convert_to_01(self, x: bool) -> float:
        return 1.0 if x else 0.0

    def create(self, suffix: str = "", meta: bool = False, automate: bool = True) -> BoolParameter:
        return super().create(suffix, meta, automate)


@dataclass(frozen=True, kw_only=True)
class ChoiceParameter(Parameter):
    """A parameter that selects one of several named choices."""

    choices: tuple[str, ...]
    default_index: int

    def __post_init__(self) -> None:
        if not 0 <= self.default_index < len(self.choices):
            raise ValueError(f"default index {self.default_index} of {self.id!r} is out of range")

    @property
    def default_value(self) -> float:
        return float(self.default_index)

    def convert_to_01(self, x: int) -> float:
        if len(self.choices) < 2:
            raise ValueError("normalising needs at least two choices")
        return x / (len(self.choices) - 1)

    def create(self, suffix: str = "", meta: bool = False, automate: bool = True) -> ChoiceParameter:
        return super().create(suffix, meta, automate)


@dataclass(frozen=True, kw_only=True)
class IntParameter(Parameter):
    """An integer parameter between two inclusive bounds."""

    minimum: int
    maximum: int
    default: int

    def __post_init__(self) -> None:
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(f"default {self.default} of {self.id!r} lies outside its bounds")

    @property
    def range(self) -> NormalisableRange:
        return NormalisableRange(float(self.minimum), float(self.maximum), 1.0)

    @property
    def default_value(self) -> float:
        return float(self.default)

    def convert_to_01(self, x: int) -> float:
        return self.range.convert_to_0to1(x)


@dataclass
class ParameterLayout:
    """An ordered collection of parameters with unique ids."""

    _parameters: dict[str, Parameter] = field(default_factory=dict)

    def add(self, *args: Parameter) -> None:
        for parameter in args:
            if parameter.id in self._parameters:
                raise ValueError(f"duplicate parameter id {parameter.id!r}")
            self._parameters[parameter.id] = parameter

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, parameter_id: object) -> bool:
        return parameter_id in self._parameters

    def __getitem__(self, parameter_id: str) -> Parameter:
        return self._parameters[parameter_id]

    @property
    def ids(self) -> list[str]:
        return list(self._parameters)

    def defaults(self) -> dict[str, float]:
        """Every parameter's default, keyed by id, in order of addition."""
        return {pid: p.default_value for pid, p in self._parameters.items()}


# analyzer and processing parameters

EQ_MAX_DB = ChoiceParameter(id="eq_max_db", choices=("6", "12", "30"), default_index=1)
EQ_MAX_DBS = (6.0, 12.0, 30.0)

FFT_MIN_DB = ChoiceParameter(id="fft_min_db", choices=("-60", "-72", "-96"), default_index=0)
FFT_MIN_DBS = (-60.0, -72.0, -96.0)


def min_db_from_index(x: float) -> float:
    """The analyzer floor in decibels for a (possibly fractional) choice index."""
    index = int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)
    if not 0 <= index < len(FFT_MIN_DBS):
        raise IndexError(f"minimum dB index {x} is out of range")
    return FFT_MIN_DBS[index]


FFT_PRE_ON = BoolParameter(id="fft_pre_on", default=True)
FFT_POST_ON = BoolParameter(id="fft_post_on", default=True)
FFT_SIDE_ON = BoolParameter(id="fft_side_on", default=False)

FFT_SPEED = ChoiceParameter(
    id="fft_speed",
    choices=("Very Fast", "Fast", "Medium", "Slow", "Very Slow"),
    default_index=2,
)
FFT_SPEEDS = (0.85, 0.90, 0.93, 0.95, 0.98)

FFT_TILT = ChoiceParameter(
    id="fft_tilt",
    choices=("0 dB/oct", "1.5 dB/oct", "3 dB/oct", "4.5 dB/oct", "6 dB/oct"),
    default_index=3,
)
FFT_TILT_SLOPES = (0.0, 1.5, 3.0, 4.5, 6.0)

FFT_FREEZE_ON = BoolParameter(id="fft_freeze_on", default=False)

FFT_STEREO = ChoiceParameter(
    id="fft_stereo", choices=("Stereo", "Left", "Right", "Mid", "Side"), default_index=0
)

COLLISION_ON = BoolParameter(id="collision_on", default=False)
COLLISION_STRENGTH = FloatParameter(
    id="collision_strength", range=NormalisableRange(0.0, 1.0, 0.01), default=0.5
)


def na_parameter_layout() -> ParameterLayout:
    """Parameters stored with the processor but not automated by the host."""
    layout = ParameterLayout()
    layout.add(EQ_MAX_DB.create(), FFT_MIN_DB.create(),
               FFT_PRE_ON.create(), FFT_POST_ON.create(), FFT_SIDE_ON.create(),
               FFT_SPEED.create(), FFT_TILT.create(),
               FFT_FREEZE_ON.create(), FFT_STEREO.create(),
               COLLISION_ON.create(), COLLISION_STRENGTH.create())
    return layout


# interface parameters

WINDOW_W = FloatParameter(id="window_w", range=NormalisableRange(600.0, 6000.0, 1.0), default=600.0)
WINDOW_H = FloatParameter(id="window_h", range=NormalisableRange(345.0, 6000.0, 1.0), default=371.0)

FONT_MODE = ChoiceParameter(id="font_mode", choices=("Scale", "Static"), default_index=0)
FONT_SCALE = FloatParameter(id="font_scale", range=NormalisableRange(0.5, 1.0, 0.01), default=0.9)
STATIC_FONT_SIZE = FloatParameter(
    id="static_font_size", range=NormalisableRange(0.1, 600.0, 0.01), default=0.9
)

WHEEL_SENSITIVITY = FloatParameter(
    id="wheel_sensitivity", range=NormalisableRange(0.0, 1.0, 0.01), default=1.0
)
WHEEL_FINE_SENSITIVITY = FloatParameter(
    id="wheel_fine_sensitivity", range=NormalisableRange(0.01, 1.0, 0.01), default=0.12
)
WHEEL_SHIFT_REVERSE = ChoiceParameter(
    id="wheel_shift_reverse", choices=("No Change", "Reverse"), default_index=0
)
DRAG_SENSITIVITY = FloatParameter(
    id="drag_sensitivity", range=NormalisableRange(0.0, 1.0, 0.01), default=1.0
)
DRAG_FINE_SENSITIVITY = FloatParameter(
    id="drag_fine_sensitivity", range=NormalisableRange(0.01, 1.0, 0.01), default=0.25
)

ROTARY_STYLE = ChoiceParameter(
    id="rotary_style",
    choices=("Circular", "Horizontal", "Vertical", "Horiz + Vert"),
    default_index=3,
)
ROTARY_STYLES = (
    "rotary",
    "rotary_horizontal_drag",
    "rotary_vertical_drag",
    "rotary_horizontal_vertical_drag",
)
ROTARY_DRAG_SENSITIVITY = FloatParameter(
    id="rotary_drag_sensitivity", range=NormalisableRange(2.0, 32.0, 0.01), default=10.0
)

SLIDER_DOUBLE_CLICK_FUNC = ChoiceParameter(
    id="slider_double_click_func", choices=("Return Default", "Open Editor"), default_index=1
)

TARGET_REFRESH_SPEED = ChoiceParameter(
    id="target_refresh_speed_id",
    choices=("120 Hz", "90 Hz", "60 Hz", "30 Hz", "15 Hz"),
    default_index=3,
)
REFRESH_RATES = (120.0, 90.0, 60.0, 30.0, 15.0)

FFT_EXTRA_TILT = FloatParameter(
    id="fft_extra_tilt", range=NormalisableRange(-4.5, 4.5, 0.01), default=0.0
)
FFT_EXTRA_SPEED = FloatParameter(
    id="fft_extra_speed", range=NormalisableRange(0.0, 2.0, 0.01), default=1.0
)
SINGLE_EQ_CURVE_THICKNESS = FloatParameter(
    id="single_eq_curve_thickness", range=NormalisableRange(0.0, 2.0, 0.01), default=1.0
)
SUM_EQ_CURVE_THICKNESS = FloatParameter(
    id="sum_eq_curve_thickness", range=NormalisableRange(0.0, 2.0, 0.01), default=1.0
)

TOOLTIP_LANG = ChoiceParameter(
    id="tool_tip_lang",
    choices=("Off", "System", "English", "简体中文", "繁體中文", "Italiano", "日本語",
             "Deutsch", "Español"),
    default_index=1,
)


class ColourMapName(IntEnum):
    """Indices of the available colour maps."""

    DEFAULT_LIGHT = 0
    DEFAULT_DARK = 1
    SEABORN_NORMAL_LIGHT = 2
    SEABORN_NORMAL_DARK = 3
    SEABORN_BRIGHT_LIGHT = 4
    SEABORN_BRIGHT_DARK = 5


COLOUR_MAP_CHOICES = (
    "Default Light", "Default Dark",
    "Seaborn Normal Light", "Seaborn Normal Dark",
    "Seaborn Bright Light", "Seaborn Bright Dark",
)
COLOUR_MAP_IDX = ChoiceParameter(id="colour_map_idx", choices=COLOUR_MAP_CHOICES, default_index=0)
COLOUR_MAP_1_IDX = ChoiceParameter(id="colour_map_1_idx", choices=COLOUR_MAP_CHOICES, default_index=1)
COLOUR_MAP_2_IDX = ChoiceParameter(id="colour_map_2_idx", choices=COLOUR_MAP_CHOICES, default_index=5)


def add_one_colour(layout: ParameterLayout, suffix: str = "", red: int = 0, green: int = 0,
                   blue: int = 0, add_opacity: bool = False, opacity: float = 1.0) -> None:
    """Add red, green and blue parameters, and optionally opacity, for one colour."""
    layout.add(IntParameter(id=suffix + "_r", minimum=0, maximum=255, default=red),
               IntParameter(id=suffix + "_g", minimum=0, maximum=255, default=green),
               IntParameter(id=suffix + "_b", minimum=0, maximum=255, default=blue))
    if add_opacity:
        layout.add(FloatParameter(id=suffix + "_o", range=NormalisableRange(0.0, 1.0, 0.01),
                                  default=opacity))


COLOUR_NAMES = (
    "text", "background",
    "shadow", "glow",
    "grid",
    "pre", "post", "side",
    "collision",
)


@dataclass(frozen=True)
class ColourDefault:
    """Default components of one interface colour."""

    r: int
    g: int
    b: int
    has_opacity: bool
    opacity: float


COLOUR_DEFAULTS = (
    ColourDefault(247, 246, 244, True, 1.0),
    ColourDefault(20, 16, 9, True, 1.0),
    ColourDefault(0, 0, 0, True, 1.0),
    ColourDefault(70, 66, 62, True, 1.0),
    ColourDefault(112, 112, 112, True, 0.25),
    ColourDefault(112, 112, 112, True, 0.2),
    ColourDefault(112, 112, 112, True, 0.2),
    ColourDefault(252, 18, 197, True, 0.1),
    ColourDefault(255, 0, 0, True, 1.0),
)


def state_parameter_layout() -> ParameterLayout:
    """Parameters that hold the interface settings."""
    layout = ParameterLayout()
    layout.add(WINDOW_W.create(), WINDOW_H.create(),
               FONT_MODE.create(), FONT_SCALE.create(), STATIC_FONT_SIZE.create(),
               WHEEL_SENSITIVITY.create(), WHEEL_FINE_SENSITIVITY.create(),
               WHEEL_SHIFT_REVERSE.create(),
               DRAG_SENSITIVITY.create(), DRAG_FINE_SENSITIVITY.create(),
               ROTARY_STYLE.create(), ROTARY_DRAG_SENSITIVITY.create(),
               SLIDER_DOUBLE_CLICK_FUNC.create(),
               TARGET_REFRESH_SPEED.create(),
               FFT_EXTRA_TILT.create(), FFT_EXTRA_SPEED.create(),
               SINGLE_EQ_CURVE_THICKNESS.create(), SUM_EQ_CURVE_THICKNESS.create(),
               TOOLTIP_LANG.create())
    for name, dv in zip(COLOUR_NAMES, COLOUR_DEFAULTS):
        add_one_colour(layout, name, dv.r, dv.g, dv.b, dv.has_opacity, dv.opacity)
    layout.add(COLOUR_MAP_1_IDX.create(), COLOUR_MAP_2_IDX.create())
    return layout
import pytest

from zlspectrum.parameters import state_parameter_layout
from zlspectrum.ui_settings import Colour, UISettings


def test_loading_layout_defaults_matches_default_settings():
    settings = UISettings()
    settings.font_scale = 0.5
    settings.load(state_parameter_layout().defaults())
    assert settings == UISettings()


def test_save_writes_every_interface_parameter_except_window_size():
    state = {}
    UISettings().save(state)
    expected = set(state_parameter_layout().ids) - {"window_w", "window_h"}
    assert set(state) == expected


def test_saved_colour_defaults_come_from_source_table():
    state = {}
    UISettings().save(state)
    assert state["text_r"] == 247.0
    assert state["text_g"] == 246.0
    assert state["collision_r"] == 255.0
    assert state["background_o"] == 1.0


def test_round_trip_of_modified_settings():
    settings = UISettings()
    settings.custom_colours[2] = Colour(10, 20, 30, 128)
    settings.font_mode = 1
    settings.wheel_sensitivity = [0.5, 0.2, 0.3, 0.4]
    settings.is_mouse_wheel_shift_reverse = True
    settings.is_slider_double_click_open_editor = False
    settings.refresh_rate_id = 0
    settings.fft_extra_tilt = -2.0
    settings.colour_map2_idx = 2
    state = {}
    settings.save(state)
    restored = UISettings()
    restored.load(state)
    assert restored == settings


def test_load_rounds_and_thresholds():
    state = state_parameter_layout().defaults()
    state["font_mode"] = 0.6
    state["wheel_shift_reverse"] = 0.4
    state["slider_double_click_func"] = 0.51
    state["grid_r"] = 99.5
    settings = UISettings()
    settings.load(state)
    assert settings.font_mode == 1
    assert settings.is_mouse_wheel_shift_reverse is False
    assert settings.is_slider_double_click_open_editor is True
    assert settings.custom_colours[4].red == 100


def test_missing_parameter_raises_key_error():
    state = state_parameter_layout().defaults()
    del state["font_scale"]
    with pytest.raises(KeyError):
        UISettings().load(state)


def test_colour_float_alpha_is_quantised_and_clamped():
    full = Colour.from_float_alpha(1, 2, 3, 2.0)
    assert full.alpha == 255
    assert Colour.from_float_alpha(1, 2, 3, -1.0).alpha == 0
    again = Colour.from_float_alpha(1, 2, 3, Colour.from_float_alpha(1, 2, 3, 0.3).float_alpha)
    assert again == Colour.from_float_alpha(1, 2, 3, 0.3)


def test_colour_rejects_out_of_range_component():
    with pytest.raises(ValueError):
        Colour(256, 0, 0)
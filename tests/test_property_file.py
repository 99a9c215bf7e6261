from pathlib import Path

from zlspectrum.property_file import PropertyFile


def test_paths_follow_source_layout(tmp_path):
    prop = PropertyFile(base_dir=tmp_path)
    assert prop.ui_path == tmp_path / "ZL Audio" / "ZL Spectrum Equalizer" / "ui.xml"
    assert prop.old_ui_path == (
        tmp_path / "Audio" / "Presets" / "ZL" / "ZL Spectrum Equalizer" / "ui.xml"
    )


def test_load_creates_blank_file_and_keeps_state(tmp_path):
    prop = PropertyFile(base_dir=tmp_path)
    state = {"font_scale": 0.9}
    prop.load(state)
    assert prop.ui_path.is_file()
    assert prop.ui_path.read_bytes() == b""
    assert state == {"font_scale": 0.9}


def test_save_then_load_round_trip(tmp_path):
    prop = PropertyFile(base_dir=tmp_path)
    prop.save({"font_scale": 0.75, "text_r": 12.0})
    state = {"font_scale": 0.9, "text_r": 247.0}
    PropertyFile(base_dir=tmp_path).load(state)
    assert state == {"font_scale": 0.75, "text_r": 12.0}


def test_constructor_with_state_loads(tmp_path):
    PropertyFile(base_dir=tmp_path).save({"grid_o": 0.5})
    state = {"grid_o": 0.25}
    PropertyFile(state, base_dir=tmp_path)
    assert state["grid_o"] == 0.5


def test_unknown_ids_in_file_are_ignored(tmp_path):
    prop = PropertyFile(base_dir=tmp_path)
    prop.save({"a": 1.0, "b": 2.0})
    state = {"a": 0.0}
    prop.load(state)
    assert state == {"a": 1.0}


def test_old_file_is_migrated(tmp_path):
    prop = PropertyFile(base_dir=tmp_path)
    old: Path = prop.old_ui_path
    old.parent.mkdir(parents=True)
    old.write_text('<?xml version="1.0"?><PARAMETERS><PARAM id="x" value="3.5"/></PARAMETERS>')
    state = {"x": 0.0}
    prop.load(state)
    assert state == {"x": 3.5}
    assert not old.exists()
    assert prop.ui_path.is_file()


def test_malformed_file_leaves_state_unchanged(tmp_path):
    prop = PropertyFile(base_dir=tmp_path)
    prop.ui_path.parent.mkdir(parents=True)
    prop.ui_path.write_text("<PARAMETERS><PARAM id=")
    state = {"x": 1.0}
    prop.load(state)
    assert state == {"x": 1.0}


def test_unparseable_value_is_skipped(tmp_path):
    prop = PropertyFile(base_dir=tmp_path)
    prop.ui_path.parent.mkdir(parents=True)
    prop.ui_path.write_text(
        '<PARAMETERS><PARAM id="x" value="abc"/><PARAM id="y" value="2"/></PARAMETERS>'
    )
    state = {"x": 1.0, "y": 0.0}
    prop.load(state)
    assert state == {"x": 1.0, "y": 2.0}
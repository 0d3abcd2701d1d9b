import logging

import pytest

from pitchplan.config import MirrorAxis, PitchLayout, default_layout_key, get_layout, iter_layouts, resolve_layout


def test_iter_layouts_lists_presets():
    keys = {layout.key for layout in iter_layouts()}
    assert keys == {"split", "full"}


def test_get_layout_is_case_insensitive():
    layout = get_layout(" FULL ")

    assert layout.key == "full"
    assert (layout.near_y, layout.far_y) == (95.0, 55.0)
    assert layout.mirror_axis is MirrorAxis.Y


def test_get_layout_unknown_key():
    with pytest.raises(KeyError):
        get_layout("diagonal")


def test_layout_depth_runs_from_near_to_far():
    layout = get_layout("split")

    assert layout.depth(0.0) == 90.0
    assert layout.depth(1.0) == 10.0
    assert layout.depth(0.5) == pytest.approx(50.0)


def test_resolve_layout():
    custom = PitchLayout(key="custom", description="", near_y=0.0, far_y=100.0, mirror_axis=MirrorAxis.X)

    assert resolve_layout(None).key == "split"
    assert resolve_layout("full").key == "full"
    assert resolve_layout(custom) is custom
    with pytest.raises(TypeError):
        resolve_layout(42)  # type: ignore[arg-type]


def test_default_layout_key_from_environment(caplog):
    assert default_layout_key({}) == "split"
    assert default_layout_key({"PITCHPLAN_LAYOUT": "Full"}) == "full"

    with caplog.at_level(logging.WARNING, logger="pitchplan.config.layouts"):
        assert default_layout_key({"PITCHPLAN_LAYOUT": "sideways"}) == "split"
    assert "Invalid layout" in caplog.text

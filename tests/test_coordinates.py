import pytest

from pitchplan.config import get_layout
from pitchplan.layout import ClassifiedPosition, LineType, Role, Side, classify_position
from pitchplan.layout.coordinates import (
    band_y,
    code_to_field,
    default_position,
    distribute_line,
    goalkeeper_position,
    grid_to_field,
    line_slots,
    middle_band_ys,
    slot_x,
)
from pitchplan.models import FieldPosition


SPLIT = get_layout("split")
FULL = get_layout("full")


def _xy(position: FieldPosition) -> tuple[float, float]:
    return position.x, position.y


def test_goalkeeper_sits_on_near_extreme():
    assert _xy(goalkeeper_position(SPLIT)) == (50.0, 90.0)
    assert _xy(goalkeeper_position(FULL)) == (50.0, 95.0)


def test_default_position_is_pitch_centre_of_the_team_area():
    assert _xy(default_position(SPLIT)) == (50.0, 50.0)
    assert _xy(default_position(FULL)) == (50.0, 75.0)


def test_bands_are_ordered_from_goal_to_attack():
    ys = [
        band_y(LineType.GOALKEEPER, Role.NEUTRAL, SPLIT),
        band_y(LineType.DEFENDER, Role.DEFENSIVE, SPLIT),
        band_y(LineType.MIDFIELDER, Role.DEFENSIVE, SPLIT),
        band_y(LineType.MIDFIELDER, Role.NEUTRAL, SPLIT),
        band_y(LineType.MIDFIELDER, Role.OFFENSIVE, SPLIT),
        band_y(LineType.FORWARD, Role.OFFENSIVE, SPLIT),
    ]
    assert ys == pytest.approx([90.0, 74.0, 58.0, 50.0, 42.0, 26.0])
    assert ys == sorted(ys, reverse=True)


def test_middle_band_ys():
    assert middle_band_ys(0, SPLIT) == []
    assert middle_band_ys(1, SPLIT) == pytest.approx([50.0])
    assert middle_band_ys(2, SPLIT) == pytest.approx([58.0, 42.0])
    assert middle_band_ys(3, SPLIT) == pytest.approx([58.0, 50.0, 42.0])


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, []),
        (1, [50.0]),
        (2, [37.5, 62.5]),
        (3, [25.0, 50.0, 75.0]),
        (4, [15.0, 38.3333, 61.6667, 85.0]),
        (5, [15.0, 32.5, 50.0, 67.5, 85.0]),
    ],
)
def test_line_slots_spread_inside_touchline_inset(count, expected):
    assert line_slots(count, SPLIT) == pytest.approx(expected, abs=1e-3)


def test_line_slots_narrowed_for_wide_players():
    assert line_slots(2, SPLIT, narrowed=True) == pytest.approx([40.0, 60.0])
    assert line_slots(3, SPLIT, narrowed=True) == pytest.approx([40.0, 50.0, 60.0])


def test_slot_x_extrapolates_to_centre():
    slots = line_slots(2, SPLIT)
    assert slot_x(slots, 1) == pytest.approx(62.5)
    assert slot_x(slots, 5) == 50.0
    assert slot_x([], 0) == 50.0


def test_distribute_line_pins_wide_players():
    members = [classify_position(code) for code in ("LB", "CB", "CB", "RB")]

    positions = distribute_line(members, 74.0, SPLIT)

    assert [_xy(p) for p in positions] == [(15.0, 74.0), (40.0, 74.0), (60.0, 74.0), (85.0, 74.0)]


def test_distribute_line_orders_inside_players_by_side():
    members = [classify_position(code) for code in ("RCB", "CB", "LCB")]

    positions = distribute_line(members, 74.0, SPLIT)

    assert [p.x for p in positions] == [75.0, 50.0, 25.0]


def test_distribute_line_wide_player_ignores_teammate_count():
    lone = distribute_line([classify_position("LM")], 50.0, SPLIT)
    crowded = distribute_line([classify_position(code) for code in ("LM", "CM", "CM", "CM")], 50.0, SPLIT)

    assert lone[0].x == crowded[0].x == 15.0


def test_grid_to_field_spreads_columns_by_row_width():
    assert [grid_to_field(2, column, 4, SPLIT).x for column in range(1, 5)] == [20.0, 40.0, 60.0, 80.0]
    assert [grid_to_field(3, column, 2, SPLIT).x for column in (1, 2)] == [33.33, 66.67]
    assert grid_to_field(5, 1, 1, SPLIT).x == 50.0


@pytest.mark.parametrize(
    "row, expected_y",
    [(1, 90.0), (2, 75.0), (3, 55.0), (4, 38.0), (5, 20.0), (6, 15.0), (7, 10.0), (8, 10.0), (12, 10.0)],
)
def test_grid_to_field_row_depths(row, expected_y):
    assert grid_to_field(row, 1, 1, SPLIT).y == expected_y


def test_grid_to_field_full_layout_rows():
    assert grid_to_field(1, 1, 1, FULL).y == 95.0
    assert grid_to_field(7, 1, 1, FULL).y == 55.0


def test_code_to_field_single_players():
    assert _xy(code_to_field(classify_position("G"), SPLIT)) == (50.0, 90.0)
    assert _xy(code_to_field(classify_position("RB"), SPLIT)) == (85.0, 74.0)
    assert _xy(code_to_field(classify_position("LS"), SPLIT)) == (25.0, 26.0)
    assert _xy(code_to_field(classify_position("CDM"), SPLIT)) == (50.0, 58.0)
    assert _xy(code_to_field(ClassifiedPosition(LineType.MIDFIELDER, Side.CENTER, Role.OFFENSIVE), SPLIT)) == (
        50.0,
        42.0,
    )


def test_grid_rows_past_the_table_stay_in_own_half():
    assert grid_to_field(8, 1, 1, FULL).y == 55.0
    assert grid_to_field(11, 2, 3, FULL).y == 55.0


def test_distribute_line_steps_stacked_wide_players_inside():
    members = [classify_position(code) for code in ("LB", "LWB", "CB", "CB", "RB")]

    positions = distribute_line(members, 74.0, SPLIT)

    assert [p.x for p in positions] == [15.0, 40.0, 55.0, 70.0, 85.0]
    assert len({p.x for p in positions}) == len(positions)


def test_distribute_line_stacked_right_wingers():
    members = [classify_position(code) for code in ("RW", "ST", "RW")]

    positions = distribute_line(members, 26.0, SPLIT)

    assert [p.x for p in positions] == [85.0, 50.0, 60.0]

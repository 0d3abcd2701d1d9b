import json

import pytest

from pitchplan.ingest import (
    RosterIngestError,
    load_roster_csv,
    load_roster_json,
    parse_lineup_payload,
    parse_roster_csv,
)


def _sample_roster_csv() -> str:
    return """id,name,number,grid,pos
101,Alisson,1,1:1,G
102,Alexander-Arnold,66,2:4,D
103,Konate,5,2:3,D
104,Van Dijk,4,2:2,D
105,Robertson,26,2:1,D
106,Mac Allister,10,3:2,M
107,Gravenberch,38,3:1,M
108,Salah,11,4:3,M
109,Szoboszlai,8,4:2,M
110,Gakpo,18,4:1,M
111,Jota,20,5:1,F
"""


def test_load_roster_csv(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text(_sample_roster_csv(), encoding="utf-8")

    roster = load_roster_csv(path)

    assert len(roster) == 11
    first = roster[0]
    assert (first.player_id, first.name, first.number, first.grid, first.position) == ("101", "Alisson", 1, "1:1", "G")
    assert roster[-1].grid == "5:1"


def test_load_roster_csv_missing_file(tmp_path):
    with pytest.raises(RosterIngestError):
        load_roster_csv(tmp_path / "missing.csv")


def test_parse_roster_csv_custom_mapping():
    text = "Shirt,First,Last,Pos\n#10,Kevin,De Bruyne,CAM\n,Ederson,,GK\n"
    mapping = {"number": "Shirt", "name": "First|Last", "position": "Pos"}

    roster = parse_roster_csv(text, mapping=mapping)

    assert [entry.player_id for entry in roster] == ["row-1", "row-2"]
    assert roster[0].number == 10
    assert roster[0].name == "Kevin De Bruyne"
    assert roster[0].position == "CAM"
    assert roster[1].number is None
    assert roster[1].name == "Ederson"
    assert roster[1].grid is None


def test_parse_roster_csv_requires_header():
    with pytest.raises(RosterIngestError):
        parse_roster_csv("")


def test_parse_lineup_payload_team_lineup():
    payload = {
        "formation": "4 – 3 – 3",
        "startXI": [
            {"player": {"id": 1, "name": "Keeper", "number": 1, "pos": "G", "grid": "1:1"}},
            {"player": {"id": 2, "name": "Back", "number": 2, "pos": "D", "grid": "2:4"}},
        ],
    }

    lineup = parse_lineup_payload(payload)

    assert lineup.formation == "4-3-3"
    assert [entry.player_id for entry in lineup.roster] == ["1", "2"]
    assert lineup.roster[1].grid == "2:4"


def test_parse_lineup_payload_plain_list():
    lineup = parse_lineup_payload([{"id": "a", "pos": "GK"}, {"id": "b", "pos": "CB"}])

    assert lineup.formation is None
    assert [entry.position for entry in lineup.roster] == ["GK", "CB"]


@pytest.mark.parametrize("payload", [{"formation": "4-4-2"}, "roster", [1, 2]])
def test_parse_lineup_payload_rejects_malformed(payload):
    with pytest.raises(RosterIngestError):
        parse_lineup_payload(payload)


def test_load_roster_json(tmp_path):
    path = tmp_path / "lineup.json"
    path.write_text(json.dumps({"formation": "4-2-3-1", "roster": [{"id": "7", "pos": "RW"}]}), encoding="utf-8")

    lineup = load_roster_json(path)

    assert lineup.formation == "4-2-3-1"
    assert lineup.roster[0].player_id == "7"


def test_load_roster_json_invalid(tmp_path):
    path = tmp_path / "lineup.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RosterIngestError):
        load_roster_json(path)


@pytest.mark.parametrize(
    "raw, expected",
    [("10", 10), ("10.0", 10), (" #7 ", 7), ("0", 0), ("10.5", None), ("-5", None), ("ten", None), ("", None)],
)
def test_parse_roster_csv_shirt_numbers(raw, expected):
    roster = parse_roster_csv(f"id,name,number,pos\n1,A,{raw},GK\n")

    assert roster[0].number == expected

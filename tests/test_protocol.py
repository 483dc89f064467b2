import json

from junction_checkers.config import GameConfig
from junction_checkers.game.session import GameSession
from junction_checkers.protocol import (
    dump_roster,
    roster_summary,
    snapshot,
    turn_banner,
)


def test_roster_summary_uses_one_based_locations():
    session = GameSession()
    summary = roster_summary(session.roster(1))

    assert summary[0] == {"location": "i: 1, j: 1", "status": "alive"}
    assert summary[3] == {"location": "i: 2, j: 2", "status": "alive"}
    assert len(summary) == 5


def test_roster_summary_reports_removed_and_wounded_pieces():
    config = GameConfig(starting_health=2, layout={1: ((0, 0),), -1: ((1, 1), (8, 4))})
    session = GameSession(config)
    session.click(0, 0)
    session.click(2, 2)

    summary = roster_summary(session.roster(-1))
    assert summary[0] == {"location": "i: 2, j: 2", "status": "wounded"}

    victim = session.roster(-1)[0]
    session.pieces.capture(victim)
    assert roster_summary([victim]) == [{"location": "unknown", "status": "dead"}]


def test_dump_roster_is_indented_json():
    session = GameSession()
    text = dump_roster(session.roster(-1))

    assert text.startswith("[\n  {")
    assert '"location": "i: 9, j: 1"' in text


def test_turn_banner():
    assert turn_banner(1) == "Player 1's Turn"
    assert turn_banner(-1) == "Player 2's Turn"


def test_snapshot_describes_selection_as_plain_json():
    session = GameSession()
    session.click(1, 1)

    message = snapshot(session)

    assert message["turn"] == 1
    assert message["phase"] == "selected"
    assert message["selected"] == 4
    assert message["options"] == [{"cell": [2, 2], "piece": None}, {"cell": [2, 0], "piece": None}]
    assert message["clickable"] == [1, 2, 3, 4, 5]
    assert message["forced"] == []
    assert message["winner"] is None
    assert len(message["pieces"]) == 10
    assert set(message["rosters"]) == {"1", "2"}

    assert json.loads(json.dumps(message)) == message


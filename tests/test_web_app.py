"""Tests for the Flask rotation API."""

import csv
import io

import pytest

from rotation_planner.services import generate_minute_schedule, generate_player_list
from rotation_planner.ui.web_app import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_defaults_endpoint(client):
    response = client.get("/api/rotation/defaults")
    data = response.get_json()

    assert response.status_code == 200
    assert data["success"] is True
    assert data["config"]["num_periods"] == 3
    assert data["config"]["checkpoints"] == [5, 10, 15]
    assert data["strategies"] == ["checkpoint", "minute"]


def test_plan_from_player_count(client):
    response = client.post("/api/rotation", json={"player_count": 8, "goalies": ["Player 1"]})
    data = response.get_json()

    assert response.status_code == 200
    assert data["success"] is True
    assert len(data["result"]["schedule"]) == 3
    assert data["result"]["total_field_minutes"] == 360
    assert data["fairness"]["goalie_mode"] == "fixed"
    assert "Rotation Schedule:" in data["report"]


def test_plan_with_named_players_and_camel_case_config(client):
    payload = {
        "players": ["Ann", "Bo", "Cy", "Di", "Ed", "Fi"],
        "goalies": ["Ann", "Bo"],
        "config": {"numPeriods": 2, "periodLength": 10, "fieldPlayersOnPitch": 4},
    }
    response = client.post("/api/rotation", json=payload)
    data = response.get_json()

    assert response.status_code == 200
    assert data["config"]["num_periods"] == 2
    assert data["result"]["total_field_minutes"] == 80
    assert [p["goalie"] for p in data["result"]["schedule"]] == ["Ann", "Bo"]


def test_minute_strategy(client):
    payload = {
        "player_count": 8,
        "goalies": ["Player 1"],
        "strategy": "minute",
        "initial_positions": {"2": "Player 8"},
    }
    response = client.post("/api/rotation", json=payload)
    data = response.get_json()

    assert response.status_code == 200
    assert len(data["result"]["schedule"]) == 60
    assert data["result"]["schedule"][0]["field"]["2"] == "Player 8"


def test_minute_strategy_uses_default_fairness_threshold(client):
    payload = {"player_count": 8, "goalies": ["Player 1"], "strategy": "minute"}
    data = client.post("/api/rotation", json=payload).get_json()

    expected = generate_minute_schedule(generate_player_list(8), ["Player 1"]).to_dict()
    assert data["result"] == expected


@pytest.mark.parametrize("payload, kind", [
    ({"player_count": 8, "goalies": ["Nobody"]}, "UnknownGoalieError"),
    ({"player_count": 8, "goalies": []}, "InvalidGoalieCountError"),
    ({"player_count": 4, "goalies": ["Player 1"]}, "InsufficientRosterError"),
    ({"player_count": 8, "goalies": ["Player 1"], "config": {"numPeriods": 0}}, "InvalidConfigError"),
    ({"player_count": 8, "goalies": ["Player 1"], "strategy": "random"}, "InvalidConfigError"),
    ({"player_count": "many", "goalies": ["Player 1"]}, "ValueError"),
    ({"player_count": 8, "goalies": ["Player 1"], "strategy": "minute", "initial_positions": ["Player 2"]},
     "InvalidConfigError"),
    ({"player_count": 8, "goalies": ["Player 1"], "strategy": "minute", "initial_positions": {"1": "Ghost", "2": "Player 1"}},
     "InvalidConfigError"),
])
def test_invalid_requests_return_400(client, payload, kind):
    response = client.post("/api/rotation", json=payload)
    data = response.get_json()

    assert response.status_code == 400
    assert data["success"] is False
    assert data["kind"] == kind
    assert data["error"]


def test_csv_export(client):
    response = client.post("/api/rotation/csv", json={"player_count": 8, "goalies": ["Player 1"]})

    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert "attachment" in response.headers["Content-Disposition"]
    rows = list(csv.reader(io.StringIO(response.get_data(as_text=True))))
    assert rows[0][0] == "Name"
    assert len(rows) == 9


def test_csv_export_error(client):
    response = client.post("/api/rotation/csv", json={"player_count": 8, "goalies": ["Nobody"]})

    assert response.status_code == 400
    assert response.get_json()["kind"] == "UnknownGoalieError"

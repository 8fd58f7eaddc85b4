from fastapi.testclient import TestClient

from rhythm_trainer.api.server import create_app
from rhythm_trainer.trainer.session import TrainerSession
from rhythm_trainer.trainer.settings import TrainerSettings


def _client() -> TestClient:
    return TestClient(create_app(TrainerSession(settings=TrainerSettings())))


def test_root_and_favicon_endpoints() -> None:
    client = _client()

    root_response = client.get("/")
    assert root_response.status_code == 200
    assert root_response.json()["status"] == "ok"

    assert client.get("/favicon.ico").status_code == 204


def test_empty_timeline_state() -> None:
    body = _client().get("/v1/timeline").json()

    assert body["total_steps"] == 16
    assert body["blocks"] == []
    assert body["glyphs"][0::4] == ["group_rest"] * 4
    assert body["selection"]["active"] is False


def test_place_and_reject_blocks() -> None:
    client = _client()

    placed = client.post("/v1/timeline/place", json={"start": 0, "length": 4, "color": "green"})
    assert placed.status_code == 200
    assert placed.json()["action"] == "placed"
    assert placed.json()["timeline"]["glyphs"][0] == "whole"

    overlap = client.post("/v1/timeline/place", json={"start": 0, "length": 2, "color": "green"})
    assert overlap.status_code == 409
    assert overlap.json()["detail"] == "overlap"

    offbeat = client.post("/v1/timeline/place", json={"start": 5, "length": 2, "color": "orange"})
    assert offbeat.status_code == 409
    assert offbeat.json()["detail"] == "offbeat_violation"

    bounds = client.post("/v1/timeline/place", json={"start": 14, "length": 4, "color": "green"})
    assert bounds.status_code == 409
    assert bounds.json()["detail"] == "out_of_bounds"

    assert client.post("/v1/timeline/place", json={"start": 4, "length": 4, "color": "orange"}).status_code == 200


def test_place_validates_payload() -> None:
    client = _client()
    assert client.post("/v1/timeline/place", json={"start": 0, "length": 3, "color": "green"}).status_code == 422
    assert client.post("/v1/timeline/place", json={"start": 16, "length": 1, "color": "green"}).status_code == 422
    assert client.post("/v1/timeline/place", json={"start": 0, "length": 1, "color": "red"}).status_code == 422


def test_slot_clicks_follow_selection_mode() -> None:
    client = _client()

    noop = client.post("/v1/timeline/slots/3/click")
    assert noop.json()["action"] == "noop"

    selected = client.post("/v1/timeline/selection", json={"length": 2, "color": "orange"})
    assert selected.json()["selection"] == {"length": 2, "color": "orange", "active": True}

    rejected = client.post("/v1/timeline/slots/3/click")
    assert rejected.status_code == 200
    assert rejected.json()["action"] == "rejected"
    assert rejected.json()["reason"] == "offbeat_violation"

    placed = client.post("/v1/timeline/slots/2/click")
    assert placed.json()["action"] == "placed"
    assert placed.json()["timeline"]["selection"]["active"] is False

    removed = client.post("/v1/timeline/slots/3/click")
    assert removed.json()["action"] == "removed"
    assert removed.json()["block"] == {"start": 2, "length": 2, "color": "orange"}

    assert client.post("/v1/timeline/slots/20/click").status_code == 400


def test_remove_clear_and_deselect() -> None:
    client = _client()
    client.post("/v1/timeline/place", json={"start": 8, "length": 1, "color": "purple"})
    client.post("/v1/timeline/place", json={"start": 10, "length": 2, "color": "orange"})

    assert client.delete("/v1/timeline/slots/11").json()["action"] == "removed"
    assert client.delete("/v1/timeline/slots/11").json()["action"] == "noop"

    client.post("/v1/timeline/selection", json={"length": 1, "color": "purple"})
    assert client.delete("/v1/timeline/selection").json()["selection"]["active"] is False

    cleared = client.post("/v1/timeline/clear").json()
    assert cleared["blocks"] == []
    assert not any(cleared["occupancy"])


def test_notation_lists_images_and_beat_labels() -> None:
    client = _client()
    client.post("/v1/timeline/place", json={"start": 1, "length": 1, "color": "purple"})

    slots = client.get("/v1/notation").json()["slots"]

    assert [slot["glyph"] for slot in slots[:3]] == ["single_rest", "eighth", "pair_rest"]
    assert slots[1]["image"] == "Cartoon Rhythm0006.png"
    assert slots[1]["image_url"].endswith("/Cartoon%20Rhythm0006.png")
    assert slots[0]["image_url"].startswith("https://")
    assert slots[0]["label"] == "1"
    assert slots[1]["label"] is None


def test_settings_update_clamps_values() -> None:
    client = _client()

    body = client.put("/v1/settings", json={"bpm": 1000, "master_volume": -1, "sound_mode": "pitch", "pitch_note": "D3"}).json()

    assert body["bpm"] == 300
    assert body["master_volume"] == 0.0
    assert body["sound_mode"] == "pitch"
    assert body["pitch_note"] == "D3"
    assert body["period_ms"] == 50.0
    assert client.get("/v1/settings").json()["bpm"] == 300
    assert client.put("/v1/settings", json={"pitch_note": "Z9"}).status_code == 422


def test_preview_returns_wav_bytes() -> None:
    client = _client()
    client.post("/v1/timeline/place", json={"start": 0, "length": 4, "color": "green"})

    response = client.post("/v1/playback/preview", json={"loops": 1})

    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/wav"
    assert response.content[:4] == b"RIFF"


def test_settings_reject_nan_volume_and_preview_still_renders() -> None:
    client = _client()
    client.post("/v1/timeline/place", json={"start": 0, "length": 2, "color": "orange"})

    response = client.put(
        "/v1/settings",
        content='{"master_volume": NaN}',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 422
    assert client.get("/v1/settings").json()["master_volume"] == 1.0
    assert client.post("/v1/playback/preview", json={"loops": 1}).status_code == 200

"""Notify fan-out."""

import logging

NOTIFY_LOGGER = "command_center.api.routes.notify"


def test_default_channel_is_log(client, caplog):
    caplog.set_level(logging.INFO, logger=NOTIFY_LOGGER)
    resp = client.post("/notify", json={"message": "deploy finished"})
    assert resp.status_code == 200
    assert resp.json() == {"sent": True, "channels": {"log": True}}
    assert "[NOTIFY] deploy finished" in caplog.text


def test_unknown_channels_are_ignored(client):
    resp = client.post("/notify", json={"message": "hi", "channels": ["log", "unknown-channel"]})
    assert resp.status_code == 200
    assert resp.json() == {"sent": True, "channels": {"log": True}}


def test_no_known_channels_still_succeeds(client, upstream):
    resp = client.post("/notify", json={"message": "hi", "channels": ["slack"]})
    assert resp.status_code == 200
    assert resp.json() == {"sent": True, "channels": {}}
    assert upstream.requests == []


def test_non_string_channels_are_ignored(client):
    resp = client.post("/notify", json={"message": "hi", "channels": ["log", 5, None, {"name": "slack"}]})
    assert resp.status_code == 200
    assert resp.json() == {"sent": True, "channels": {"log": True}}

from datetime import datetime, timezone

from netalert import Notification


def test_text_format():
    n = Notification(provider_name="Telnet", label="Blue", body="down")
    assert n.text == "Notification from Telnet (Color: Blue): down"
    assert str(n) == n.text


def test_defaults_and_to_dict():
    ts = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    n = Notification(provider_name="CMac", label="Black", body="m", notification_id="n1", timestamp=ts)
    assert n.to_dict() == {
        "notification_id": "n1",
        "provider_name": "CMac",
        "label": "Black",
        "body": "m",
        "timestamp": "2025-01-02T03:04:05+00:00",
    }

    generated = Notification(provider_name="CMac", label="Black", body="m")
    assert generated.timestamp is not None
    assert generated.notification_id.startswith("CMac_")

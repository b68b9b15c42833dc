import logging

import pytest


def test_status_accepts_twilio_form_post(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.api.routes.status"):
        resp = client.post(
            "/twilio/status",
            data={"CallSid": "CA123", "CallStatus": "ringing", "SequenceNumber": "1"},
        )

    assert resp.status_code == 200
    assert resp.content == b""
    assert "call_sid=CA123 status=ringing" in caplog.text


def test_status_accepts_json(client):
    resp = client.post("/twilio/status", json={"CallSid": "CA123", "CallStatus": "completed"})

    assert resp.status_code == 200
    assert resp.content == b""


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"json": []},
        {"json": {"CallSid": 12, "CallStatus": ["odd"]}},
        {"content": b"{not json", "headers": {"content-type": "application/json"}},
        {"content": b"\xff\xfe", "headers": {"content-type": "application/octet-stream"}},
    ],
)
def test_status_never_fails(client, kwargs):
    resp = client.post("/twilio/status", **kwargs)

    assert resp.status_code == 200
    assert resp.content == b""


def test_status_accepts_multipart_form(client, caplog):
    boundary = "twilio-boundary"
    body = (
        f"--{boundary}\r\n"
        'Content-Disposition: form-data; name="CallSid"\r\n\r\n'
        "CA777\r\n"
        f"--{boundary}\r\n"
        'Content-Disposition: form-data; name="CallStatus"\r\n\r\n'
        "answered\r\n"
        f"--{boundary}--\r\n"
    ).encode()

    with caplog.at_level(logging.INFO, logger="app.api.routes.status"):
        resp = client.post(
            "/twilio/status",
            content=body,
            headers={"content-type": f"multipart/form-data; boundary={boundary}"},
        )

    assert resp.status_code == 200
    assert "call_sid=CA777 status=answered" in caplog.text

"""Tests for health, debug session, response headers and the SSE heartbeat."""
import asyncio
import json
from datetime import datetime, timezone

from roster_api.errors import error_response
from roster_api.services.heartbeat import heartbeat_event, heartbeat_stream


class TestHealth:

    def test_health_needs_no_auth(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "OK"
        assert "timestamp" in body
        assert body["service"]

    def test_security_headers(self, client):
        resp = client.get("/health")
        assert resp.headers["x-content-type-options"] == "nosniff"
        assert resp.headers["x-frame-options"] == "SAMEORIGIN"


class TestDebugSession:

    def test_without_cookie(self, client):
        body = client.get("/api/debug/session").json()
        assert body["hasToken"] is False
        assert body["user"] is None

    def test_with_carer_cookie(self, carer_client):
        body = carer_client.get("/api/debug/session").json()
        assert body["hasToken"] is True
        assert body["user"]["username"] == "jane_doe"
        assert body["user"]["role"] == "carer"

    def test_with_forged_cookie(self, client):
        client.cookies.set("token", "garbage")
        body = client.get("/api/debug/session").json()
        assert body["hasToken"] is True
        assert body["user"] is None


class TestHeartbeat:

    def test_updates_require_auth(self, client):
        resp = client.get("/api/roster/updates")
        assert resp.status_code == 401

    def test_heartbeat_frame(self):
        frame = heartbeat_event(datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc))
        assert frame.startswith("data: ")
        assert frame.endswith("\n\n")
        payload = json.loads(frame[len("data: "):])
        assert payload == {"type": "heartbeat", "timestamp": "2026-10-19T08:00:00+00:00"}

    def test_heartbeat_frame_defaults_to_now(self):
        payload = json.loads(heartbeat_event()[len("data: "):])
        stamp = datetime.fromisoformat(payload["timestamp"])
        assert stamp.tzinfo is not None
        assert abs((datetime.now(timezone.utc) - stamp).total_seconds()) < 60

    def test_stream_yields_heartbeats(self):
        async def take(n):
            stream = heartbeat_stream(0)
            frames = [await stream.__anext__() for _ in range(n)]
            await stream.aclose()
            return frames

        frames = asyncio.run(take(2))
        assert len(frames) == 2
        assert all(json.loads(f[len("data: "):])["type"] == "heartbeat" for f in frames)


class TestErrorShape:

    def test_unknown_route_uses_error_key(self, client):
        resp = client.get("/api/nothing-here")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Not Found"}

    def test_error_response_without_headers(self):
        resp = error_response(418, "teapot")
        assert resp.status_code == 418
        assert json.loads(resp.body) == {"error": "teapot"}

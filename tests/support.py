"""Shared helpers for the test suite."""

import json
import os
from datetime import datetime, timedelta, timezone

import httpx

from clickboard.core.time import isoformat_z
from clickboard.services.store import JsonStore

STORE_URL = os.environ["LEADERBOARD_STORE_URL"]
MASTER_KEY = os.environ["LEADERBOARD_MASTER_KEY"]
BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def ts(seconds: int) -> str:
    return isoformat_z(BASE_TIME + timedelta(seconds=seconds))


def record(name, score, seconds=0, **extra):
    return {"name": name, "score": score, "timestamp": ts(seconds), **extra}


class StoreStub:
    """In-memory stand-in for the remote document store."""

    def __init__(self, document=None, *, get_status=200, put_status=200, network_error=False):
        self.document = document
        self.get_status = get_status
        self.put_status = put_status
        self.network_error = network_error
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.network_error:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method == "GET":
            if self.get_status != 200:
                return httpx.Response(self.get_status, text="bin unavailable")
            return httpx.Response(
                200,
                content=json.dumps(self.document).encode(),
                headers={"Content-Type": "application/json"},
            )
        if request.method == "PUT":
            if self.put_status != 200:
                return httpx.Response(self.put_status, text="write refused")
            self.document = json.loads(request.content)
            return httpx.Response(200, json={"record": self.document})
        return httpx.Response(405)

    def store(self) -> JsonStore:
        return JsonStore(STORE_URL, MASTER_KEY, transport=httpx.MockTransport(self.handler))

    @property
    def methods(self):
        return [request.method for request in self.requests]

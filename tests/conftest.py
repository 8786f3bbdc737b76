import json
import pytest
import requests

from unittest.mock import MagicMock

from config import Config
from payloads import InteractionRef


@pytest.fixture
def config(tmp_path):
    return Config(env_file=str(tmp_path / "missing.env"),
                  api_token="bot-token",
                  api_url="https://discord.test/api",
                  api_version="10",
                  application_id="111")


@pytest.fixture
def ref():
    return InteractionRef(id="222", application_id="111", token="tok")


@pytest.fixture
def make_response():
    """Builds a stand-in for requests.Response."""
    def _make(status: int = 200, body=None, headers=None):
        resp = MagicMock(spec=requests.Response)
        resp.status_code = status
        if body is None:
            resp.content = b""
        elif isinstance(body, bytes):
            resp.content = body
        elif isinstance(body, str):
            resp.content = body.encode()
        else:
            resp.content = json.dumps(body).encode()
        resp.headers = headers or {}
        return resp
    return _make

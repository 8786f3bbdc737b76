"""
Tests for error normalization.
"""

import json
import requests

from errors import (InteractionError, TransportError, ValidationError, from_exception,
                    from_response, looks_like_json, parse_body)


class TestParseBody:
    def test_json_looking_body_is_decoded(self):
        assert looks_like_json(b'{"a": 1}')
        assert parse_body(b'{"a": 1}') == {"a": 1}

    def test_other_bodies_stay_raw_text(self):
        assert not looks_like_json(b"<html>bad gateway</html>")
        assert parse_body(b"<html>bad gateway</html>") == "<html>bad gateway</html>"
        assert parse_body(b"") == ""


class TestTransportError:
    def test_lifts_discord_code_and_message(self, make_response):
        error = from_response(make_response(404, {"code": 10008, "message": "Unknown Message"}))

        assert error.status == 404
        assert error.code == 10008
        assert error.message == "Unknown Message"
        assert json.loads(str(error))["error"] == {"code": 10008, "message": "Unknown Message"}

    def test_raw_text_body(self, make_response):
        error = from_response(make_response(502, "bad gateway"))

        assert error.body == "bad gateway"
        assert error.code is None
        assert "bad gateway" in str(error)
        assert "502" in str(error)


class TestFromException:
    def test_library_errors_pass_through(self):
        error = ValidationError("bad")

        assert from_exception(error) is error

    def test_http_error_keeps_status_and_body(self, make_response):
        resp = make_response(403, {"message": "Missing Access", "code": 50001})

        error = from_exception(requests.HTTPError(response=resp))

        assert isinstance(error, TransportError)
        assert error.status == 403
        assert error.code == 50001

    def test_request_exception_has_no_status(self):
        error = from_exception(requests.Timeout("timed out"))

        assert isinstance(error, TransportError)
        assert error.status is None
        assert error.message == "timed out"

    def test_anything_else_becomes_interaction_error(self):
        error = from_exception(OSError("disk"))

        assert type(error) is InteractionError
        assert str(error) == "disk"

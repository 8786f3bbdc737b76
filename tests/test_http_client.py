"""
Tests for the JSON transport adapter.
"""

import pytest
import requests

from unittest.mock import patch

from http_client import HttpClient, JsonRequest


class TestHttpClient:
    @patch("http_client.requests.request")
    def test_json_body_and_credential(self, mock_request, config, make_response):
        mock_request.return_value = make_response(204)
        http = HttpClient(config)

        http.send(JsonRequest(method="post", path="interactions/1/t/callback", body={"type": 4, "data": {}}))

        (method, url) = mock_request.call_args.args
        kwargs = mock_request.call_args.kwargs
        assert method == "POST"
        assert url == "https://discord.test/api/v10/interactions/1/t/callback"
        assert kwargs["headers"] == {"Authorization": "Bot bot-token"}
        assert kwargs["json"] == {"type": 4, "data": {}}

    @patch("http_client.requests.request")
    def test_get_without_body_sends_query(self, mock_request, config, make_response):
        mock_request.return_value = make_response(200, {"id": "1"})
        http = HttpClient(config)

        http.send(JsonRequest(method="get", path="webhooks/1/t/messages/2", query={"thread_id": "3"}))

        kwargs = mock_request.call_args.kwargs
        assert kwargs["json"] is None
        assert kwargs["params"] == {"thread_id": "3"}
        assert "Content-Type" not in kwargs["headers"]

    @patch("http_client.requests.request")
    def test_network_errors_propagate(self, mock_request, config):
        mock_request.side_effect = requests.ConnectionError("down")

        with pytest.raises(requests.ConnectionError):
            HttpClient(config).request("GET", "webhooks/1/t/messages/@original")

#!/usr/bin/env python3

import requests
import json

from config import Config
from dataclasses import dataclass
from typing import Dict, Any
from logs import logger as base_logger

logger = base_logger.bind(context="HttpClient")


@dataclass(frozen=True, kw_only=True)
class JsonRequest:
    method: str
    path: str
    body: Dict[str, Any] | None = None
    query: Dict[str, Any] | None = None


class HttpClient:
    _api_url: str
    _config: Config

    def __init__(self, config: Config):
        self._config = config
        self._api_url = config.base_url

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bot {self._config.api_token}"}

    def request(self, method: str, path: str, body: Dict[str, Any] | None = None,
                query: Dict[str, Any] | None = None) -> requests.Response:
        method = method.upper()
        logger.log("OUT", f"{method} {path}" + (f" {json.dumps(body)}" if body is not None else ""))
        resp = requests.request(method,
                                f"{self._api_url}/{path}",
                                headers=self._headers(),
                                params=query,
                                json=body)
        logger.log("IN", f"{method} {path} GOT STATUS {resp.status_code}")
        return resp

    def send(self, request: JsonRequest) -> requests.Response:
        return self.request(request.method, request.path, body=request.body, query=request.query)


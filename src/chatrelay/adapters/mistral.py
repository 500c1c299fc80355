"""Mistral chat.completions adapter (OpenAI-compatible REST)."""
from __future__ import annotations

import requests
from typing import Any, Dict, List

from ..config import DEFAULT_ENDPOINT, sanitize_api_key
from ..errors import ConfigError, UpstreamError
from .base import BaseChatAdapter

class MistralAdapter(BaseChatAdapter):
    def __init__(self, api_key: str, endpoint: str = DEFAULT_ENDPOINT, timeout: int = 30):
        key = sanitize_api_key(api_key)
        if not key:
            raise ConfigError("MistralAdapter requires a non-empty API key")
        self._api_key = key
        self.endpoint = endpoint
        self.timeout = timeout

    def generate(self, messages: List[Dict[str, Any]], cfg: Dict[str, Any]) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        payload: Dict[str, Any] = {
            "model": cfg.get("model"),
            "messages": messages,
            "max_tokens": cfg.get("max_tokens", 1000),
        }

        try:
            r = requests.post(self.endpoint, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"request failed: {e}")

        if r.status_code != 200:
            raise UpstreamError(f"http {r.status_code}: {r.text[:800]}")

        try:
            return r.json()
        except ValueError as e:
            raise UpstreamError(f"invalid JSON from Mistral AI: {e}")

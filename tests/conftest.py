from typing import Any, Dict, List

import pytest

from src.chatrelay.adapters import BaseChatAdapter

class FakeAdapter(BaseChatAdapter):
    def __init__(self, response: Any = None, exc: Exception = None):
        self.response = response
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []

    def generate(self, messages, cfg):
        self.calls.append({"messages": messages, "cfg": cfg})
        if self.exc is not None:
            raise self.exc
        return self.response

def reply(content: str) -> Dict[str, Any]:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}

@pytest.fixture
def fake_adapter():
    return FakeAdapter(response=reply("X"))

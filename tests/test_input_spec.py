import json

import pytest

from src.chatrelay.errors import ValidationError
from src.chatrelay.input_spec import MISSING_PARAMS, load_payload, parse_request

def test_load_payload_decodes_json_text():
    body = json.dumps({"systemPrompt": "sys", "userMessage": "hi"})
    assert load_payload(body) == {"systemPrompt": "sys", "userMessage": "hi"}

def test_load_payload_accepts_bytes_and_dicts():
    assert load_payload(b'{"userMessage": "hi"}') == {"userMessage": "hi"}
    d = {"userMessage": "hi"}
    assert load_payload(d) is d

def test_load_payload_non_object_is_empty():
    assert load_payload(None) == {}
    assert load_payload("[1, 2]") == {}

def test_load_payload_bad_json_raises():
    with pytest.raises(json.JSONDecodeError):
        load_payload("{not json")

def test_parse_minimal_defaults_max_tokens():
    req = parse_request({"systemPrompt": "sys", "userMessage": "hi"})
    assert req.system_prompt == "sys"
    assert req.user_message == "hi"
    assert req.max_tokens == 1000

def test_parse_passes_max_tokens_through():
    assert parse_request({"systemPrompt": "s", "userMessage": "u", "maxTokens": 100}).max_tokens == 100
    assert parse_request({"systemPrompt": "s", "userMessage": "u", "maxTokens": "250"}).max_tokens == 250
    assert parse_request({"systemPrompt": "s", "userMessage": "u", "maxTokens": 0}).max_tokens == 1000

@pytest.mark.parametrize("payload", [
    {},
    {"systemPrompt": "sys"},
    {"userMessage": "hi"},
    {"systemPrompt": "", "userMessage": "hi"},
    {"systemPrompt": "sys", "userMessage": "   "},
    {"systemPrompt": 42, "userMessage": "hi"},
])
def test_parse_missing_fields(payload):
    with pytest.raises(ValidationError) as ei:
        parse_request(payload)
    assert str(ei.value) == MISSING_PARAMS

@pytest.mark.parametrize("bad", [-5, 1.5, "many", True, False])
def test_parse_rejects_bad_max_tokens(bad):
    with pytest.raises(ValidationError):
        parse_request({"systemPrompt": "s", "userMessage": "u", "maxTokens": bad})

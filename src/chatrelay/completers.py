"""Demo / live completion backends.

The mode is picked once, when the handler is built, and never changes:
- DemoCompleter: no API key (or the "demo-key" sentinel). Canned text, no network.
- LiveCompleter: Mistral chat.completions through an adapter.

Both expose complete(system_prompt, user_message, max_tokens) -> str.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .adapters import BaseChatAdapter, MistralAdapter
from .config import Settings
from .errors import UpstreamError
from .logging_util import get_logger

logger = get_logger(__name__)

DEMO_NOTICE = "DEMO mode: the service is up. No real API call to Mistral was made."
EMPTY_RESPONSE = "Empty response received from Mistral AI"
UNSUPPORTED_CONTENT = "Unsupported content format received from Mistral AI"

class Completer:
    demo = False
    notice: Optional[str] = None

    def complete(self, system_prompt: str, user_message: str, max_tokens: int) -> str:
        raise NotImplementedError

class DemoCompleter(Completer):
    demo = True
    notice = DEMO_NOTICE

    def complete(self, system_prompt: str, user_message: str, max_tokens: int) -> str:
        return (
            f'[DEMO OUTPUT] I received your message: "{user_message}". '
            "This is a simulated response to test the flow."
        )

def build_messages(system_prompt: str, user_message: str) -> List[Dict[str, Any]]:
    # Mistral takes the system prompt as a regular message, not a separate field.
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_message},
    ]

def extract_text(raw: Dict[str, Any]) -> str:
    choices = raw.get("choices") if isinstance(raw, dict) else None
    if not choices:
        raise UpstreamError(EMPTY_RESPONSE)
    msg = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = (msg or {}).get("content")
    if content is None:
        raise UpstreamError(EMPTY_RESPONSE)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # Chunked content: keep the text chunks, drop reasoning/reference ones.
        texts = [c.get("text") for c in content if isinstance(c, dict) and c.get("type") == "text"]
        if texts and all(isinstance(t, str) for t in texts):
            return "".join(texts)
    raise UpstreamError(f"{UNSUPPORTED_CONTENT}: {type(content).__name__}")

class LiveCompleter(Completer):
    def __init__(self, adapter: BaseChatAdapter, model: str, log_error: Optional[Callable[[str], Any]] = None):
        self.adapter = adapter
        self.model = model
        self._log_error = log_error or logger.error

    def complete(self, system_prompt: str, user_message: str, max_tokens: int) -> str:
        messages = build_messages(system_prompt, user_message)
        cfg = {"model": self.model, "max_tokens": max_tokens}
        try:
            raw = self.adapter.generate(messages, cfg)
            return extract_text(raw)
        except Exception as e:
            self._log_error(f"Error in Mistral service: {e}")
            raise

def build_completer(settings: Settings, log: Optional[Callable[[str], Any]] = None) -> Completer:
    log = log or logger.info
    if settings.demo:
        log("Mistral service initialized in DEMO mode (no API key)")
        return DemoCompleter()

    adapter = MistralAdapter(api_key=settings.api_key, endpoint=settings.endpoint, timeout=settings.timeout)
    log(f"Mistral service initialized with API key (model={settings.model})")
    return LiveCompleter(adapter, settings.model)

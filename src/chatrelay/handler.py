"""RequestHandler: one invocation in, (status, envelope) out."""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .completers import Completer, build_completer
from .config import DEFAULT_MAX_TOKENS, Settings
from .errors import MethodNotAllowed, ValidationError
from .input_spec import load_payload, parse_request
from .types import Envelope, HandlerResponse, Invocation
from .logging_util import get_logger, log_step

logger = get_logger(__name__)

class RequestHandler:
    def __init__(self, completer: Completer, default_max_tokens: int = DEFAULT_MAX_TOKENS):
        self.completer = completer
        self.default_max_tokens = default_max_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "RequestHandler":
        return cls(build_completer(settings), default_max_tokens=settings.default_max_tokens)

    @property
    def demo(self) -> bool:
        return self.completer.demo

    def handle(self, invocation: Invocation) -> Tuple[int, Dict[str, Any]]:
        return self.respond(invocation).as_tuple()

    def respond(self, invocation: Invocation) -> HandlerResponse:
        log = invocation.log or logger.info
        error = invocation.error or logger.error

        log_step(logger, "1", "method check")
        if (invocation.method or "").upper() != "POST":
            log(f"Rejected method: {invocation.method}")
            return HandlerResponse(MethodNotAllowed.status_code, Envelope(error="Method not allowed"))

        try:
            log_step(logger, "2", "parse body")
            payload = load_payload(invocation.body)

            log_step(logger, "3", "validate fields")
            try:
                req = parse_request(payload, default_max_tokens=self.default_max_tokens)
            except ValidationError as e:
                return HandlerResponse(e.status_code, Envelope(success=False, error=str(e)))

            log_step(logger, "4", "demo completion" if self.demo else "call provider")
            text = self.completer.complete(req.system_prompt, req.user_message, req.max_tokens)

            return HandlerResponse(200, Envelope(success=True, message=self.completer.notice, data=text))

        except Exception as e:
            error(f"Function execution failed: {e}")
            logger.debug("handler failure", exc_info=True)
            return HandlerResponse(500, Envelope(success=False, error=str(e)))

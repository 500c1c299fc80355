"""AWS Lambda entrypoint.

Design goals:
- Keep this file small and stable.
- Delegate all real logic to src/chatrelay so that the same handler runs from the CLI
  harness and from Lambda.

Expected event shapes:
1) API Gateway REST proxy (v1):
   {"httpMethod": "POST", "body": "{\"systemPrompt\":\"...\",\"userMessage\":\"...\"}"}

2) API Gateway HTTP API / function URL (v2):
   {"requestContext": {"http": {"method": "POST"}}, "body": "...", "isBase64Encoded": false}

3) Direct invoke / local test (event itself is the JSON dict, method defaults to POST):
   {"systemPrompt": "...", "userMessage": "...", "maxTokens": 100}

Return:
- statusCode: 200 / 400 / 405 / 500
- body: JSON string of {"success":..., "data"|"error":..., "message"?:...}
"""
import base64
import binascii
import json
from typing import Any, Dict, Optional

from src.chatrelay.config import load_settings
from src.chatrelay.errors import ChatRelayError
from src.chatrelay.handler import RequestHandler
from src.chatrelay.types import Invocation
from src.chatrelay.logging_util import get_logger

logger = get_logger(__name__)

# A bad config must not kill the cold start: every invocation reports it as a 500.
_handler: Optional[RequestHandler] = None
_init_error: Optional[ChatRelayError] = None
try:
    _handler = RequestHandler.from_settings(load_settings())
except ChatRelayError as e:
    logger.error("handler init failed: %s", e)
    _init_error = e

def _event_method(event: Dict[str, Any]) -> str:
    if event.get("httpMethod"):
        return str(event["httpMethod"])
    http = (event.get("requestContext") or {}).get("http") or {}
    if http.get("method"):
        return str(http["method"])
    return str(event.get("method") or "POST")

def _event_body(event: Dict[str, Any]) -> Any:
    if "body" not in event:
        return event
    body = event.get("body")
    if event.get("isBase64Encoded") and isinstance(body, str):
        try:
            # bytes; the handler decodes them inside its error boundary
            return base64.b64decode(body)
        except binascii.Error as e:
            logger.warning("body flagged base64 but did not decode: %s", e)
    return body

def to_invocation(event: Dict[str, Any]) -> Invocation:
    event = event if isinstance(event, dict) else {}
    return Invocation(
        method=_event_method(event),
        body=_event_body(event),
        log=logger.info,
        error=logger.error,
    )

def lambda_handler(event: Dict[str, Any], context: Any):
    request_id = getattr(context, "aws_request_id", None)
    invocation = to_invocation(event)
    logger.info("invocation request_id=%s method=%s", request_id, invocation.method)

    if _handler is None:
        status, envelope = 500, {"success": False, "error": str(_init_error)}
    else:
        status, envelope = _handler.handle(invocation)
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(envelope, ensure_ascii=False),
    }

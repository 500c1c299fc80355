class ChatRelayError(Exception):
    status_code = 500

class ConfigError(ChatRelayError):
    pass

class ValidationError(ChatRelayError):
    status_code = 400

class MethodNotAllowed(ChatRelayError):
    status_code = 405

class UpstreamError(ChatRelayError):
    pass

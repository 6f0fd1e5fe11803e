"""Server-side proxy to the hosted completion API.

Responsibilities:
    - Holding upstream credentials and model selection (never sent to clients)
    - Forwarding the conversation to the completion API
    - Reducing the SDK response to a single assistant reply

Maintains clean separation from the HTTP layer.
"""

from minichat.proxy.config import ProxyConfig, get_proxy_config
from minichat.proxy.upstream import CompletionService, UpstreamError

__all__ = ["CompletionService", "ProxyConfig", "UpstreamError", "get_proxy_config"]

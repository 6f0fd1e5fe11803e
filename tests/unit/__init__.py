"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - proxy/: Configuration and the upstream completion service
    - ui/: Draft validation, view state, proxy client, markdown, variants

Uses mocks for the OpenAI SDK and httpx.MockTransport for HTTP.
"""

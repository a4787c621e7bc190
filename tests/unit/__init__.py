"""Unit tests for individual components in isolation.

Coverage:
    - client/: Request encoding and error mapping via httpx.MockTransport
    - controller/: State transitions, top_k coercion, busy guard
    - config and display helpers

No network. Each test queues the responses it needs.
"""

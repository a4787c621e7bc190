"""Test package for the Course Notes RAG client.

Structure:
    - unit/: Client, controller, config and formatting in isolation
    - integration/: Controller against an in-process stand-in service

Uses pytest with pytest-asyncio for coroutines and pytest-check for soft assertions.
"""

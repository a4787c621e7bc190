"""Integration tests for the controller talking to a service over HTTP.

The remote RAG service is replaced by a small FastAPI app served through
httpx.ASGITransport, so multipart and JSON encoding are exercised for real.
"""

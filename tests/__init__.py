# tests/__init__.py
"""
Test Suite for the Conlang Morphology Engine

Organization:
- `engine`: Engine tests (pure functions, no I/O).
- `http_api`: FastAPI endpoint tests via TestClient.
- top level: use case and CLI tests.
"""

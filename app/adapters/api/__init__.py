# app/adapters/api/__init__.py
"""
REST API Adapter.

HTTP entry point for the morphology engine, built on FastAPI:
- It depends on `app.core` (use cases & request models) and `morphology`.
- It wires the `app.shared.container` to inject the use case.
- It does NOT contain morphological logic.
"""

# NOTE: create_app is not imported here to avoid circular imports
# when the DI container wires this package.

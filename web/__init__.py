"""
Web application package for the Connect Four engine.

Provides a FastAPI-based REST API that a browser UI calls to get the
computer's next move. Run with `python -m web` or any ASGI server pointed at
web.app:app.
"""

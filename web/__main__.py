"""
Start the web application under uvicorn.

Configuration comes from the environment:
    CONNECT4_HOST       bind address (default 0.0.0.0)
    CONNECT4_PORT       TCP port (default 51338)
    CONNECT4_LOG_LEVEL  uvicorn log level (default info)
"""

import os

import uvicorn

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 51338


def main() -> None:
    uvicorn.run(
        "web.app:app",
        host=os.environ.get("CONNECT4_HOST", DEFAULT_HOST),
        port=int(os.environ.get("CONNECT4_PORT", DEFAULT_PORT)),
        log_level=os.environ.get("CONNECT4_LOG_LEVEL", "info"),
    )


if __name__ == "__main__":
    main()

"""Run the ZenReader API with uvicorn: ``python -m zenreader``."""

import os

import uvicorn


def main() -> None:
    host = os.getenv("ZENREADER_HOST", "127.0.0.1")
    port = int(os.getenv("ZENREADER_PORT", "8000"))
    uvicorn.run("zenreader.main:app", host=host, port=port)


if __name__ == "__main__":
    main()

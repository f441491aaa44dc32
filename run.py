"""Run the mnemo memory + persona API. Load .env before reading config.

Usage: python run.py [--host 127.0.0.1] [--port 8000] [--no-reload]
"""
import argparse
from pathlib import Path
try:
    from dotenv import load_dotenv
    load_dotenv(Path(__file__).resolve().parent / ".env")
except ImportError:
    pass
import uvicorn
from mnemo.utils.config import API_HOST, API_PORT


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the mnemo extraction and persona API.")
    parser.add_argument("--host", default=API_HOST, help="Bind address (MNEMO_API_HOST)")
    parser.add_argument("--port", type=int, default=API_PORT, help="Bind port (MNEMO_API_PORT)")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload on code changes")
    args = parser.parse_args()
    uvicorn.run(
        "mnemo.api.server:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
    )


if __name__ == "__main__":
    main()

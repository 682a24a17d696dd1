#!/usr/bin/env python3
"""
TaxMap Spain — launch the web front end.

Usage:
    python main.py                          # http://localhost:8000
    python main.py --port 9000              # http://localhost:9000
    python main.py --host 0.0.0.0           # bind to all interfaces
    python main.py --profile local-only     # skip remote sources
    python main.py --reload                 # auto-reload on code changes
"""

from __future__ import annotations

import argparse
import os
import sys
import webbrowser

from utils.config import PROBE_PROFILES


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Launch the TaxMap Spain chart page.",
    )
    parser.add_argument(
        "--host", default=os.getenv("APP_HOST", "127.0.0.1"),
        help="Bind address (default: 127.0.0.1 or APP_HOST env var)",
    )
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("APP_PORT", "8000")),
        help="Port to listen on (default: 8000 or APP_PORT env var)",
    )
    parser.add_argument(
        "--profile", choices=PROBE_PROFILES, default=None,
        help="Source chain (default: full or TAXMAP_PROBE_PROFILE env var)",
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload on file changes (development mode)",
    )
    parser.add_argument(
        "--no-browser", action="store_true",
        help="Don't open a browser window automatically",
    )
    args = parser.parse_args()

    # Set profile env var if provided via CLI
    if args.profile is not None:
        os.environ["TAXMAP_PROBE_PROFILE"] = args.profile

    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn is not installed.")
        print("  pip install uvicorn[standard]")
        sys.exit(1)

    url = f"http://{'localhost' if args.host == '0.0.0.0' else args.host}:{args.port}"
    print(f"Starting TaxMap Spain at {url}")
    print(f"Source profile: {os.getenv('TAXMAP_PROBE_PROFILE', 'full')}")
    print()

    if not args.no_browser:
        # Open browser after a short delay to let the server start
        import threading
        threading.Timer(1.5, webbrowser.open, args=(url,)).start()

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()

#!/usr/bin/env python
"""
Serve the basket API with uvicorn.

Usage:
    python scripts/run_api.py [--host HOST] [--port PORT] [--reload]
"""
import argparse
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Run the Widget Basket API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    print(f"Starting Widget Basket API on http://{args.host}:{args.port} ...")
    uvicorn.run(
        "widget_basket.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()

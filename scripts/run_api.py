#!/usr/bin/env python3
"""
RepSheet — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000
"""

import argparse

import uvicorn


def main():
    parser = argparse.ArgumentParser(description='RepSheet API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')

    args = parser.parse_args()

    print("=" * 60)
    print("📋 RepSheet — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print("=" * 60)

    # Сесії живуть у пам'яті процесу — тільки один worker
    if args.workers != 1:
        print("⚠️ Sessions are in-memory, forcing workers=1")

    uvicorn.run(
        "rep_sheet.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1,
        log_level="info",
    )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Starts the Jasic IDE
"""
import logging
import os
import sys
import webbrowser
from threading import Timer

from jasic import log_level_from_env

HOST = os.environ.get("JASIC_HOST", "127.0.0.1")
PORT = int(os.environ.get("JASIC_PORT", "8000"))

REQUIRED_MODULES = [
    'main.py', 'lexer.py', 'parser.py', 'interpreter.py',
    'jasic_ast.py', 'values.py', 'errors.py', 'jasic.py',
]

def project_path(*parts):
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), *parts)

def open_browser():
    """Opens the browser once the server has had a moment to start"""
    print("🌐 Opening browser...")
    webbrowser.open(f'http://{HOST}:{PORT}')

def main():
    logging.basicConfig(
        level=log_level_from_env("INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("🚀 Jasic IDE")
    print("=" * 50)

    missing_files = [name for name in REQUIRED_MODULES if not os.path.exists(project_path(name))]
    if missing_files:
        print("❌ Required files not found:")
        for name in missing_files:
            print(f"   - {name}")
        return 1

    if not os.path.exists(project_path('static', 'index.html')):
        print("⚠️  static/index.html not found; only the /api endpoints will be served.")

    print(f"🔄 Starting FastAPI server on http://{HOST}:{PORT} ...")

    timer = Timer(2.0, open_browser)
    timer.start()

    import uvicorn
    try:
        uvicorn.run("main:app", host=HOST, port=PORT)
    except KeyboardInterrupt:
        print("\n👋 Server stopped. Bye!")
    finally:
        timer.cancel()
    return 0

if __name__ == "__main__":
    sys.exit(main())

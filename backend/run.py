#!/usr/bin/env python3
"""
Places Catalog - Run Script
This script starts the FastAPI backend server
"""

import sys
import subprocess
from pathlib import Path

from catalog.core.config import settings

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def main():
    print_colored(f"🚀 Starting {settings.SERVICE_NAME}...", "blue")

    places_file = Path(settings.PLACES_FILE)
    if places_file.exists():
        print(f"📂 Using snapshot: {places_file.resolve()}")
    else:
        print_colored(f"⚠️  {places_file} not found, the catalog will start empty.", "yellow")

    print_colored("🌐 Starting Uvicorn server...", "blue")
    print(f"📍 Backend will be available at: http://localhost:{settings.PORT}")
    print(f"📍 API Health check: http://localhost:{settings.PORT}/health")
    print(f"📍 API Documentation: http://localhost:{settings.PORT}/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "catalog.main:app",
            "--host", settings.HOST,
            "--port", str(settings.PORT)
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()

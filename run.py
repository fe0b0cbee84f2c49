#!/usr/bin/env python3
"""Startup script for the GlobPathology auth portal."""

import subprocess
import sys

from globpath.config import get_globpath_config


def main():
    """Run the auth portal."""
    settings = get_globpath_config()
    print("Starting GlobPathology auth portal...")
    print(f"Authentication backend: {settings.API_URL}")
    print(f"App will be available at http://localhost:{settings.FRONTEND_PORT}")
    print()

    try:
        subprocess.run([sys.executable, "-m", "reflex", "run"], check=True)
    except KeyboardInterrupt:
        print("\nAuth portal stopped")
    except subprocess.CalledProcessError as e:
        print(f"Error running app: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

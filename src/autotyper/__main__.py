"""autotyper CLI bootstrap."""

from __future__ import annotations

from autotyper.cli import app

if __name__ == "__main__":
    app()

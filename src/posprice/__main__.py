"""Entry point for ``python -m posprice``."""

from posprice.cli import app

if __name__ == "__main__":
    app()

"""Entry point for ``python -m file_exercises``."""

from file_exercises.cli import app

if __name__ == "__main__":
    app()

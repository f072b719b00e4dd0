"""Allow running prsummary with ``python -m prsummary``."""

from prsummary.cli import app

if __name__ == "__main__":
    app()

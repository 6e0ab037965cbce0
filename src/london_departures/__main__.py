"""Allow running the dashboard with ``python -m london_departures``."""

from london_departures.main import run

if __name__ == "__main__":
    run()

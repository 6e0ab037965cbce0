"""London departures: live rail and light-rail boards for the terminal."""

__version__ = "0.1.0"

"""Daily puzzle solutions (day01 to day25) with report helpers and a timed command-line runner."""

__version__ = "0.1.0"
"""ClassHub: class rosters and activity signups."""

__version__ = "0.1.0"

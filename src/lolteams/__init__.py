"""Player stats tracking and balanced 5v5 team generation for League of Legends in-houses."""

__version__ = "0.1.0"

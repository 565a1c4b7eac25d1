"""Rules engine for a tower defense level: levels, waves, enemies, towers and player data."""

__version__ = "0.1.0"
"""manylicenses - license compliance gate for dependency inventories."""

__version__ = "0.1.0"

"""HTTP accessors for the Asterisk REST Interface: bridges, media, devices and time formats."""

__version__ = "0.1.0"
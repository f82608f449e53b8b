"""Turn-based hex map game built around the :mod:`hex_pathing` core."""

__version__ = "0.1.0"

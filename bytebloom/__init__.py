"""A gardening simulation game with plants, pests, weather, a market and a command line."""

__version__ = "0.1.0"
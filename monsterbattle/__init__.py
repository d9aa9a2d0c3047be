"""A console gem-matching monster battle game and three small console programs."""

__version__ = "0.1.0"
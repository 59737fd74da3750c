"""Game selection carousel: configuration, events, selector and an OpenGL front end."""

__version__ = "0.1.0"
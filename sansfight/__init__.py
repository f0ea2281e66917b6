"""A bullet-dodging arcade game on a 160x160 four-colour console, shown with pygame."""

__version__ = "0.1.0"
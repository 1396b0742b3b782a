"""Neuroevolution of feed-forward networks and a utility-AI decision brain."""

__version__ = "0.1.0"
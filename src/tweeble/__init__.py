"""Tweeble: short posts, peep mentions and likes over a JSON API."""

__version__ = "0.1.0"

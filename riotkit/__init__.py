"""Typed models and a static-data client for the Riot Games APIs."""

__version__ = "0.1.0"
"""Command-line client for the Puter cloud platform."""

__version__ = "0.1.0"

"""Resolve directory-listing options from command-line values, environment, configuration and defaults."""

__version__ = "0.1.0"
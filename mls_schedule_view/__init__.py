"""Weekly schedule layout for MLS class offering tables."""

__version__ = "0.1.0"

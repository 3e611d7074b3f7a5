"""panmon - terminal dashboard for a Panchaea work-distribution server."""

__version__ = "0.1.0"

"""REST bridge that drives a Zureo ERP browser session."""

__version__ = "0.1.0"

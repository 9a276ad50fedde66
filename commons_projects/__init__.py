"""Projects view service: browse projects and create new ones from Wikimedia Commons pages."""

__version__ = "0.1.0"

"""musicorg: restructure ripped album trees into a normalized music library."""

__version__ = "0.1.0"

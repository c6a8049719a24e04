"""User interfaces for musicorg."""

"""Feature packages: metadata I/O, album discovery and restructuring."""

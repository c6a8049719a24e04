"""Infrastructure helpers: logging, filesystem and the external splitter."""

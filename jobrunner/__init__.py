"""A curses menu that runs shell jobs defined in a YAML file."""

__version__ = "0.1.0"
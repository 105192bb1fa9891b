"""Entry files, entry definitions, transflows and JavaScript flow code generation for a markdown knowledge manager."""

__version__ = "0.1.0"
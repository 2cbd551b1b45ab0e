"""Core pieces of the LUDWIG text editor: characters, commands, key tables, cursor movement, pattern DFAs and help indexing."""

__version__ = "0.1.0"
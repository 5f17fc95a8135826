"""Command-line and other outer interfaces."""

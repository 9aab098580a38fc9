"""Command line interface for martini."""

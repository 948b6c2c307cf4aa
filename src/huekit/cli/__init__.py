"""Command line interface for huekit."""

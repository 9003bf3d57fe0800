"""Command line entry points for the vocabulary drill."""

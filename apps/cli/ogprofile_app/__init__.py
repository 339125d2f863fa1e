"""Command line driver for the speaker profile card generator."""

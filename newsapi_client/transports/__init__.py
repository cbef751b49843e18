"""Interchangeable I/O backends performing the GET call."""

"""Shared helpers (logging) for the CineSuggest backend."""

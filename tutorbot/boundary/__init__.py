"""Boundary adapters: database persistence and hosted HTTP APIs."""

"""TutorBot: Socratic teaching-assistant chat backend."""

__version__ = "0.1.0"

"""Input document readers."""

"""Combat session mechanics."""

"""Resume keyword filter: PDF intake and keyword ranking."""

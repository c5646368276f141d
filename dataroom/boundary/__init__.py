"""Infrastructure adapters: database persistence."""

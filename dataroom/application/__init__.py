"""Application services layer."""

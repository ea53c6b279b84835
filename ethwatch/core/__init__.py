"""Core shared pieces: domain exceptions."""

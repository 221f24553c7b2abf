"""Infrastructure adapters backing the collaborator protocols."""

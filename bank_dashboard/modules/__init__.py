"""Domain modules grouped by collaborator."""

"""PageKit Data Document — document store bindings."""

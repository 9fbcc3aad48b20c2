"""PageKit configuration property classes."""

"""PageKit Data Relational — relational store bindings."""

"""Implementation modules for segsweep (internal layout, may change)."""

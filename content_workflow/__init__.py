"""Content approval workflow for a single piece of text content."""

"""Infrastructure — loading form definitions from disk."""

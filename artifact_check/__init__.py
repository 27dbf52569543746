"""Static quality checks for a single-file web artifact."""

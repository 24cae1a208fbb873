"""Text-to-visualization-spec service."""

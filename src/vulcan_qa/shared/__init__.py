"""State shared between steps, hooks and helpers of a single scenario."""

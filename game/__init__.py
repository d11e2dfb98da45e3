"""Detective Quest game content and bootstrap."""

"""Detective Quest engine: mansion tree, clue set, suspect index and verdict."""

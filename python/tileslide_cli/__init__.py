"""Terminal frontend for the tileslide puzzle engine."""

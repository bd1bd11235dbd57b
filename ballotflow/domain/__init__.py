"""Domain layer - election rules with no infrastructure dependencies."""

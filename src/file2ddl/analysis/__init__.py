"""Column type analysis."""

"""Application – query building and paginated result handling."""

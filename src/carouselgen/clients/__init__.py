"""External service clients: the structured-output model and stock image search."""

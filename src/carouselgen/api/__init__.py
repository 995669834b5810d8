"""FastAPI adapter streaming generation events as server-sent events."""

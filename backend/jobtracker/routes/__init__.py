"""Server-rendered web routes."""

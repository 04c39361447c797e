"""Infrastructure helpers: environment parsing and logging."""

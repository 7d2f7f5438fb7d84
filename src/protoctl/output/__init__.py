"""Output layer — rendering ServiceResult for the terminal."""

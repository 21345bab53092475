"""Output layer — JSON, quiet, and Rich human rendering of ServiceResult."""

"""Service layer: interactive collection and the article creation pipeline."""

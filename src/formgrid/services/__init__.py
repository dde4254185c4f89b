"""Service layer — render passes and ServiceResult-returning operations."""

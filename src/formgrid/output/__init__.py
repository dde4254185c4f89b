"""Rich/JSON output for ServiceResult."""

"""Service layer: orchestrates decode, validate and encode for callers."""

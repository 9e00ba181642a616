"""Service layer — result-returning operations over the domain."""

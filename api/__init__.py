"""HTTP routes, shared dependencies and middleware."""

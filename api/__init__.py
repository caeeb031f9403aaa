"""API layer - routes, middleware, and request dependencies."""

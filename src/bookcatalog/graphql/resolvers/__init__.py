"""Resolver package for GraphQL schema.

Resolvers read the catalog from the per-request GraphQL context and convert
catalog entries to GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.

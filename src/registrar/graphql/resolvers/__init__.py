"""Resolver package for the GraphQL schema.

Each module resolves the root fields and relationship fields of one entity.
Resolvers reach the database only through the repository and loaders placed
in the request context.
"""

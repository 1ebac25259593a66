"""Resolver package for GraphQL schema.

Resolver functions referenced by the root query live in sibling modules.
"""

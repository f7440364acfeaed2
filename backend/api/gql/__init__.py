"""
GraphQL API.

A single /graphql endpoint over the same auth and post services as the
REST routes. Identity is resolved with the lenient policy; each resolver
decides what anonymous callers may do.
"""

from .schema import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]

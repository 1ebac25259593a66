"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..catalog import Catalog, default_catalog
from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query)


class SchemaValidationError(RuntimeError):
    """Raised when the GraphQL schema fails validation at startup."""


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core's structural validation followed by an introspection
    query so that broken type references fail the server before it binds.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


def print_schema() -> str:
    """Render the schema as GraphQL SDL."""
    return schema.as_str()


def create_graphql_router(
    catalog: Catalog | None = None,
    path: str = "/graphql",
    graphiql: bool = True,
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI serving the given catalog."""
    served_catalog = catalog if catalog is not None else default_catalog()

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "catalog": served_catalog,
        }

    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )

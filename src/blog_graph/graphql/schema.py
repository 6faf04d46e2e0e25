import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from blog_graph.core.init_settings import settings
from blog_graph.core.store import DataStore, get_store
from blog_graph.graphql.queries import Query
from blog_graph.graphql.mutations import Mutation


async def get_context(store: DataStore = Depends(get_store)):
    """
    Provide the data store to resolvers.

    The store comes from a FastAPI dependency so tests can swap in an
    isolated instance with ``app.dependency_overrides``.
    """
    return {
        "store": store,
    }


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)

graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.GRAPHQL_IDE else None,
)

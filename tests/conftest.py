import pytest
from httpx import ASGITransport, AsyncClient
from asgi_lifespan import LifespanManager

from blog_graph.core.store import get_store
from blog_graph.db.seed import build_sample_store
from blog_graph.graphql.schema import schema
from blog_graph.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    """A freshly seeded store, isolated from other tests."""
    return build_sample_store()


@pytest.fixture
async def client(store):
    """Async test client with lifespan support, bound to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        async with LifespanManager(app) as manager:
            async with AsyncClient(
                transport=ASGITransport(app=manager.app),
                base_url="http://test",
            ) as ac:
                yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def execute(store):
    """Run a GraphQL document directly against the schema."""
    def _execute(query, variables=None):
        return schema.execute_sync(
            query,
            variable_values=variables,
            context_value={"store": store},
        )

    return _execute

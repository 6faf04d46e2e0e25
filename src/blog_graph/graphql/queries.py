import strawberry
from strawberry.types import Info

from blog_graph.graphql.types import User, user_from_model


@strawberry.type
class Query:
    @strawberry.field
    def hello(self) -> str:
        return "world"

    @strawberry.field
    def me(self, info: Info) -> User | None:
        user = info.context["store"].current_user()
        if user is None:
            return None
        return user_from_model(user)

    @strawberry.field
    def users(self, info: Info) -> list[User]:
        return [user_from_model(u) for u in info.context["store"].list_users()]

    @strawberry.field
    def user(self, info: Info, name: str) -> User | None:
        user = info.context["store"].find_user_by_name(name)
        if user is None:
            return None
        return user_from_model(user)

"""
GraphQL types for users and posts.

Scalar fields are copied from the store models; relational and unit-converted
fields are resolved on demand against the store held in the request context.
"""
import strawberry
from strawberry.types import Info

from blog_graph import models
from blog_graph.graphql.units import HeightUnit, WeightUnit, convert_height, convert_weight


@strawberry.type
class User:
    id: strawberry.ID
    name: str
    age: int

    _model: strawberry.Private[models.User]

    @strawberry.field
    def friends(self, info: Info) -> list["User"]:
        """Friends in the order they are stored, not the order listed."""
        friend_ids = set(self._model.friend_ids)
        return [
            user_from_model(u)
            for u in info.context["store"].list_users()
            if u.id in friend_ids
        ]

    @strawberry.field
    def height(self, unit: HeightUnit | None = HeightUnit.CENTIMETRE) -> float:
        return convert_height(self._model.height, unit)

    @strawberry.field
    def weight(self, unit: WeightUnit | None = WeightUnit.KILOGRAM) -> float:
        return convert_weight(self._model.weight, unit)

    @strawberry.field
    def posts(self, info: Info) -> list["Post"]:
        return [post_from_model(p) for p in info.context["store"].posts_by_author(self._model.id)]


@strawberry.type
class Post:
    id: strawberry.ID = strawberry.field(description="Identifier")
    title: str = strawberry.field(description="Title")
    content: str | None = strawberry.field(description="Content")

    _model: strawberry.Private[models.Post]

    @strawberry.field(description="Author")
    def author(self, info: Info) -> User | None:
        author = info.context["store"].find_user_by_id(self._model.author_id)
        if author is None:
            return None
        return user_from_model(author)

    @strawberry.field(description="Users who liked this post")
    def like_givers(self, info: Info) -> list[User | None]:
        store = info.context["store"]
        givers = [store.find_user_by_id(user_id) for user_id in self._model.like_giver_ids]
        return [user_from_model(u) if u is not None else None for u in givers]


def user_from_model(user: models.User) -> User:
    """Convert a store User to the Strawberry User type."""
    return User(
        id=strawberry.ID(str(user.id)),
        name=user.name,
        age=user.age,
        _model=user,
    )


def post_from_model(post: models.Post) -> Post:
    """Convert a store Post to the Strawberry Post type."""
    return Post(
        id=strawberry.ID(str(post.id)),
        title=post.title,
        content=post.content,
        _model=post,
    )

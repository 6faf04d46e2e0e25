import strawberry
from strawberry.types import Info

from blog_graph.core.exceptions import NoCurrentUserError, PostNotFoundError
from blog_graph.core.logging import get_logger
from blog_graph.graphql.types import Post, post_from_model

logger = get_logger(__name__)


def _current_user_id(info: Info) -> int:
    me = info.context["store"].current_user()
    if me is None:
        raise NoCurrentUserError()
    return me.id


@strawberry.input
class AddPostInput:
    title: str
    content: str | None = None


@strawberry.type
class Mutation:
    @strawberry.mutation
    def add_post(self, info: Info, input: AddPostInput) -> Post:
        post = info.context["store"].add_post(
            author_id=_current_user_id(info),
            title=input.title,
            content=input.content,
        )
        logger.info("post_added", post_id=post.id, author_id=post.author_id)
        return post_from_model(post)

    @strawberry.mutation
    def like_post(self, info: Info, post_id: strawberry.ID) -> Post:
        """Like a post as the current user, or take the like back."""
        try:
            numeric_id = int(post_id)
        except ValueError:
            raise PostNotFoundError(post_id) from None

        user_id = _current_user_id(info)
        post = info.context["store"].toggle_like(numeric_id, user_id)
        if post is None:
            raise PostNotFoundError(post_id)
        logger.info(
            "post_like_toggled",
            post_id=post.id,
            user_id=user_id,
            liked=user_id in post.like_giver_ids,
        )
        return post_from_model(post)

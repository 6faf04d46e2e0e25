"""
In-memory data store and the process-wide instance.

Both collections live for the lifetime of the process; nothing is persisted.
Lookups are linear scans and return None when nothing matches.
"""
import threading
from collections.abc import Iterable

from blog_graph.models import Post, User


class DataStore:
    """Owns the users and posts collections."""

    def __init__(
        self,
        users: Iterable[User] | None = None,
        posts: Iterable[Post] | None = None,
    ):
        self._users: list[User] = list(users or [])
        self._posts: list[Post] = list(posts or [])
        # Guards id assignment and like-list edits
        self._lock = threading.Lock()

    @property
    def is_empty(self) -> bool:
        return not self._users and not self._posts

    def load(self, users: Iterable[User], posts: Iterable[Post]) -> None:
        """Replace both collections."""
        with self._lock:
            self._users = list(users)
            self._posts = list(posts)

    def list_users(self) -> list[User]:
        return list(self._users)

    def list_posts(self) -> list[Post]:
        return list(self._posts)

    def current_user(self) -> User | None:
        """The fixed viewer: the first stored user, or None if there are none."""
        return self._users[0] if self._users else None

    def find_user_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    def find_user_by_name(self, name: str) -> User | None:
        return next((u for u in self._users if u.name == name), None)

    def find_post_by_id(self, post_id: int) -> Post | None:
        return next((p for p in self._posts if p.id == post_id), None)

    def posts_by_author(self, author_id: int) -> list[Post]:
        return [p for p in self._posts if p.author_id == author_id]

    def add_post(self, author_id: int, title: str, content: str | None = None) -> Post:
        """Append a new post with the next free id and no likes."""
        with self._lock:
            next_id = max((p.id for p in self._posts), default=0) + 1
            post = Post(
                id=next_id,
                author_id=author_id,
                title=title,
                content=content,
                like_giver_ids=[],
            )
            self._posts.append(post)
            return post

    def toggle_like(self, post_id: int, user_id: int) -> Post | None:
        """Add user_id to the post's like-givers, or remove it if present.

        Returns None if the post does not exist.
        """
        with self._lock:
            post = self.find_post_by_id(post_id)
            if post is None:
                return None
            if user_id in post.like_giver_ids:
                post.like_giver_ids.remove(user_id)
            else:
                post.like_giver_ids.append(user_id)
            return post


store = DataStore()


def get_store() -> DataStore:
    """Return the process-wide store for dependency injection."""
    return store

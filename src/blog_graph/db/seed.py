"""
Sample data for the in-memory store.

Usage:
    # Seed the process-wide store on startup
    seed_if_empty(store)

    # Build an isolated, seeded store (tests)
    store = build_sample_store()
"""
from blog_graph.core.store import DataStore
from blog_graph.models import Post, User


USERS_SAMPLE = [
    {"id": 1, "name": "Spencer", "age": 20, "friend_ids": [2, 3], "height": 175, "weight": 75},
    {"id": 2, "name": "Wesley", "age": 25, "friend_ids": [1], "height": 180, "weight": 80},
    {"id": 3, "name": "Leo", "age": 30, "friend_ids": [2], "height": 185, "weight": 74},
]

POSTS_SAMPLE = [
    {"id": 1, "author_id": 1, "title": "Hello World!", "content": "This is my first post.", "like_giver_ids": [2]},
    {"id": 2, "author_id": 2, "title": "Good Night", "content": "Have a Nice Dream =)", "like_giver_ids": [2, 3]},
    {"id": 3, "author_id": 1, "title": "I Love U", "content": "Here's my second post!", "like_giver_ids": []},
]


def sample_users() -> list[User]:
    return [User(**data) for data in USERS_SAMPLE]


def sample_posts() -> list[Post]:
    # Fresh model instances each call so stores never share like lists
    return [Post(**data) for data in POSTS_SAMPLE]


def seed_if_empty(store: DataStore) -> bool:
    """Load the sample data if the store holds nothing yet.

    Returns:
        True if data was loaded, False if the store was already populated.
    """
    if not store.is_empty:
        return False
    store.load(sample_users(), sample_posts())
    return True


def build_sample_store() -> DataStore:
    return DataStore(users=sample_users(), posts=sample_posts())

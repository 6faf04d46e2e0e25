from blog_graph.models.user import User
from blog_graph.models.post import Post

__all__ = ["User", "Post"]

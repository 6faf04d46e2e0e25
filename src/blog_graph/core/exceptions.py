"""Errors raised by resolvers and surfaced as GraphQL field errors."""


class BlogGraphError(Exception):
    """Base class for errors raised by this API."""


class UnsupportedUnitError(BlogGraphError):
    """A unit argument did not match any known unit."""

    def __init__(self, kind: str, unit: object):
        self.kind = kind
        self.unit = unit
        super().__init__(f'{kind} unit "{unit}" not supported.')


class PostNotFoundError(BlogGraphError):
    def __init__(self, post_id: object):
        self.post_id = post_id
        super().__init__(f"Post {post_id} Not Exists")


class NoCurrentUserError(BlogGraphError):
    def __init__(self):
        super().__init__("No current user")

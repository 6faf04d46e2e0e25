from pydantic import BaseModel, Field


class Post(BaseModel):
    id: int
    author_id: int
    title: str
    content: str | None = None
    like_giver_ids: list[int] = Field(default_factory=list)

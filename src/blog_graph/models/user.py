from pydantic import BaseModel, Field


class User(BaseModel):
    id: int
    name: str
    age: int
    friend_ids: list[int] = Field(default_factory=list)
    height: float  # centimetres
    weight: float  # kilograms

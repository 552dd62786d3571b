from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)


class UserCreated(BaseModel):
    id: int


class UserProfile(BaseModel):
    name: str
    image: str
    model_config = ConfigDict(from_attributes=True)


class User(BaseModel):
    id: int
    email: str
    pass_hash: bytes = Field(repr=False)
    name: str
    image: str
    model_config = ConfigDict(from_attributes=True)

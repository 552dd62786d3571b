from pydantic import BaseModel, ConfigDict, Field


class App(BaseModel):
    name: str
    secret: str = Field(repr=False)
    model_config = ConfigDict(from_attributes=True)

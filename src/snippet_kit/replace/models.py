from pydantic import BaseModel, Field


class ReplaceStep(BaseModel):
    find: str
    replace: str = ""

    class Config:
        extra = "forbid"


class ReplaceOperation(BaseModel):
    name: str = Field(min_length=1)
    steps: list[ReplaceStep] = Field(default_factory=list)

    class Config:
        extra = "forbid"

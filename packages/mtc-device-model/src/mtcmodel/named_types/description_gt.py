from typing import Literal

from pydantic import BaseModel, Field


class DescriptionGt(BaseModel):
    Text: str = ""
    Attributes: dict[str, str] = Field(default_factory=dict)
    TypeName: Literal["description.gt"] = "description.gt"
    Version: Literal["000"] = "000"

from typing import Literal, Optional

from pydantic import BaseModel

from mtcmodel.property_format import EntityId


class CompositionGt(BaseModel):
    Id: EntityId
    Type: str
    Name: Optional[str] = None
    TypeName: Literal["composition.gt"] = "composition.gt"
    Version: Literal["000"] = "000"

from typing import Literal, Optional

from pydantic import BaseModel

from mtcmodel.property_format import EntityId


class DataItemGt(BaseModel):
    Id: EntityId
    Type: str
    Category: str = "EVENT"
    Name: Optional[str] = None
    SubType: Optional[str] = None
    Units: Optional[str] = None
    Source: Optional[str] = None
    TypeName: Literal["data.item.gt"] = "data.item.gt"
    Version: Literal["000"] = "000"

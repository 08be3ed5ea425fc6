from typing import Annotated, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict

from mtcmodel.enums import ReferenceKind
from mtcmodel.property_format import EntityId


class ReferenceGt(BaseModel):
    """Kind accepts the kind name or the reference element name
    (DataItemRef, ComponentRef)."""

    IdRef: EntityId
    Kind: Annotated[ReferenceKind, BeforeValidator(ReferenceKind.from_ref_element)]
    Name: Optional[str] = None
    TypeName: Literal["reference.gt"] = "reference.gt"
    Version: Literal["000"] = "000"

    model_config = ConfigDict(use_enum_values=True)

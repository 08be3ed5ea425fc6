from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self

from mtcmodel.named_types.composition_gt import CompositionGt
from mtcmodel.named_types.data_item_gt import DataItemGt
from mtcmodel.named_types.description_gt import DescriptionGt
from mtcmodel.named_types.reference_gt import ReferenceGt
from mtcmodel.property_format import is_entity_id


class ComponentGt(BaseModel):
    """A component declaration as handed over by the document parser.

    Child declarations appear in document order; a reference may name an id
    declared anywhere in the same device, including later in the document.
    """

    Class: str
    Prefix: str = ""
    Attributes: dict[str, str]
    Description: Optional[DescriptionGt] = None
    Configuration: Optional[str] = None
    DataItems: list[DataItemGt] = Field(default_factory=list)
    Compositions: list[CompositionGt] = Field(default_factory=list)
    References: list[ReferenceGt] = Field(default_factory=list)
    Components: list["ComponentGt"] = Field(default_factory=list)
    TypeName: Literal["component.gt"] = "component.gt"
    Version: Literal["000"] = "000"

    @model_validator(mode="after")
    def check_axiom_1(self) -> Self:
        """
        Axiom 1: Identity. Attributes carry a non-empty id in EntityId format.
        """
        is_entity_id(self.Attributes.get("id", ""))
        return self

    @property
    def component_id(self) -> str:
        return self.Attributes["id"]


ComponentGt.model_rebuild()

import weakref
from typing import TYPE_CHECKING, Optional

from mtcmodel.data_classes.attribute_set import AttributeSet
from mtcmodel.named_types import DataItemGt

if TYPE_CHECKING:
    from mtcmodel.data_classes.component import Component


class DataItem:
    """A measurement, event or condition channel owned by a component.

    Opaque to the device model beyond its identity and type; the owning
    component is held as a weak back link.
    """

    gt: DataItemGt

    def __init__(self, gt: DataItemGt) -> None:
        self.gt = gt
        self._component: Optional[weakref.ReferenceType["Component"]] = None

    @property
    def id(self) -> str:
        return self.gt.Id

    @property
    def name(self) -> Optional[str]:
        return self.gt.Name

    @property
    def type(self) -> str:
        return self.gt.Type

    @property
    def category(self) -> str:
        return self.gt.Category

    @property
    def sub_type(self) -> Optional[str]:
        return self.gt.SubType

    @property
    def units(self) -> Optional[str]:
        return self.gt.Units

    @property
    def source(self) -> Optional[str]:
        return self.gt.Source

    @property
    def component(self) -> Optional["Component"]:
        if self._component is None:
            return None
        return self._component()

    def set_component(self, component: "Component") -> None:
        self._component = weakref.ref(component)

    @property
    def attributes(self) -> AttributeSet:
        items = {"id": self.id, "type": self.type, "category": self.category}
        if self.name:
            items["name"] = self.name
        if self.sub_type:
            items["subType"] = self.sub_type
        if self.units:
            items["units"] = self.units
        return AttributeSet(items)

    def __repr__(self) -> str:
        return f"<DataItem {self.id}> ({self.type})"

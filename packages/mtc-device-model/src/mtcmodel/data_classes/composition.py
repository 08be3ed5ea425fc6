import weakref
from typing import TYPE_CHECKING, Optional

from mtcmodel.named_types import CompositionGt

if TYPE_CHECKING:
    from mtcmodel.data_classes.component import Component


class Composition:
    gt: CompositionGt

    def __init__(self, gt: CompositionGt) -> None:
        self.gt = gt
        self._component: Optional[weakref.ReferenceType["Component"]] = None

    @property
    def id(self) -> str:
        return self.gt.Id

    @property
    def type(self) -> str:
        return self.gt.Type

    @property
    def name(self) -> Optional[str]:
        return self.gt.Name

    @property
    def component(self) -> Optional["Component"]:
        if self._component is None:
            return None
        return self._component()

    def set_component(self, component: "Component") -> None:
        self._component = weakref.ref(component)

    def __repr__(self) -> str:
        return f"<Composition {self.id}> ({self.type})"

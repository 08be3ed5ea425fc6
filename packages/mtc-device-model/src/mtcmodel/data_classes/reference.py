import weakref
from typing import TYPE_CHECKING, Optional, Union

from mtcmodel.enums import ReferenceKind, ReferenceState
from mtcmodel.errors import UnresolvedReferenceError

if TYPE_CHECKING:
    from mtcmodel.data_classes.component import Component
    from mtcmodel.data_classes.data_item import DataItem

ReferenceTarget = Union["Component", "DataItem"]


class Reference:
    """A by-id pointer from a component to a data item or component elsewhere
    in the same device.

    A Reference starts Unresolved, holding only the id it names. The resolution
    pass binds it to the live entity; the binding is a weak link and never owns
    its target. Consumers must check ``state`` (or use ``target_or_raise``)
    before dereferencing.
    """

    id: str
    name: Optional[str]
    kind: ReferenceKind
    owner_id: Optional[str]

    def __init__(
        self,
        id: str,  # noqa: A002
        name: Optional[str],
        kind: ReferenceKind | str,
    ) -> None:
        self.id = id
        self.name = name or None
        self.kind = ReferenceKind(kind)
        self.owner_id = None
        self._target: Optional[weakref.ReferenceType[ReferenceTarget]] = None

    @property
    def state(self) -> ReferenceState:
        if self.target is None:
            return ReferenceState.Unresolved
        return ReferenceState.Resolved

    @property
    def resolved(self) -> bool:
        return self.state == ReferenceState.Resolved

    @property
    def target(self) -> Optional[ReferenceTarget]:
        if self._target is None:
            return None
        return self._target()

    @property
    def component(self) -> Optional["Component"]:
        if self.kind != ReferenceKind.Component:
            return None
        return self.target  # type: ignore[return-value]

    @property
    def data_item(self) -> Optional["DataItem"]:
        if self.kind != ReferenceKind.Channel:
            return None
        return self.target  # type: ignore[return-value]

    def target_or_raise(self) -> ReferenceTarget:
        target = self.target
        if target is None:
            raise UnresolvedReferenceError(self.owner_id or "", self.id, self.kind)
        return target

    def bind(self, target: ReferenceTarget) -> None:
        self._target = weakref.ref(target)

    def unbind(self) -> None:
        self._target = None

    def __repr__(self) -> str:
        return f"<Reference {self.kind} {self.id}> ({self.state})"

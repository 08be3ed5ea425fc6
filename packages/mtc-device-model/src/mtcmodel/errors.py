from typing import Any, Optional


class DeviceModelError(Exception):
    """Base class for errors raised while building or using a device model."""


class DuplicateIdError(DeviceModelError):
    """Two entities of one device share an id. Fatal to the load."""

    entity_id: str
    first: Any
    second: Any

    def __init__(self, entity_id: str, first: Any, second: Any) -> None:  # noqa: ANN401
        self.entity_id = entity_id
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate id <{entity_id}>: {first!r} collides with {second!r}"
        )


class PrematureTraversalError(DeviceModelError):
    """An ancestor walk or builder call was made before the tree was ready."""


class ReferenceResolutionError(DeviceModelError):
    """A single reference could not be bound. Collected, not raised, by the
    resolution pass."""

    component_id: str
    reference_id: str
    kind: str

    def __init__(
        self,
        component_id: str,
        reference_id: str,
        kind: str,
        msg: Optional[str] = None,
    ) -> None:
        self.component_id = component_id
        self.reference_id = reference_id
        self.kind = str(kind)
        if msg is None:
            msg = (
                f"Component <{component_id}> {self.kind} reference "
                f"<{reference_id}> could not be resolved"
            )
        super().__init__(msg)


class UnresolvedReferenceError(ReferenceResolutionError):
    def __init__(self, component_id: str, reference_id: str, kind: str) -> None:
        super().__init__(
            component_id,
            reference_id,
            kind,
            f"Component <{component_id}> {kind} reference <{reference_id}>: "
            "no entity with that id in the device",
        )


class KindMismatchError(ReferenceResolutionError):
    actual_type: str

    def __init__(
        self, component_id: str, reference_id: str, kind: str, actual_type: str
    ) -> None:
        self.actual_type = actual_type
        super().__init__(
            component_id,
            reference_id,
            kind,
            f"Component <{component_id}> {kind} reference <{reference_id}> "
            f"names a {actual_type}",
        )

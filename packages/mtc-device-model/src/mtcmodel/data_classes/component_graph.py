import logging
import typing
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional, TypeVar, Union

from mtcmodel.data_classes.component import Component
from mtcmodel.data_classes.data_item import DataItem
from mtcmodel.data_classes.device import Device
from mtcmodel.data_classes.reference import Reference
from mtcmodel.errors import (
    DeviceModelError,
    DuplicateIdError,
    ReferenceResolutionError,
)

module_logger = logging.getLogger(__name__)

T = TypeVar("T")

Entity = Union[Component, DataItem]


class ComponentGraph:
    """The identity index of one device, and the reference resolution pass
    that runs against it.

    The index covers every component and data item in the device's tree and is
    frozen when the graph is built, so resolution always sees the complete
    namespace. Build the graph only after the whole tree for the device exists.
    """

    device: Device
    index: Mapping[str, Entity]
    reference_errors: list[ReferenceResolutionError]

    def __init__(self, device: Device) -> None:
        self.device = device
        self.index = MappingProxyType(self.build_index(device))
        self.reference_errors = []
        self._resolved = False

    @classmethod
    def build_index(cls, device: Device) -> dict[str, Entity]:
        index: dict[str, Entity] = {}
        for component in device.walk():
            cls._register(index, component.id, component)
            for data_item in component.data_items:
                cls._register(index, data_item.id, data_item)
        module_logger.debug(
            "Indexed %d entities for device %s", len(index), device.id
        )
        return index

    @classmethod
    def _register(cls, index: dict[str, Entity], entity_id: str, entity: Entity) -> None:
        existing = index.get(entity_id)
        if existing is not None:
            raise DuplicateIdError(entity_id, existing, entity)
        index[entity_id] = entity

    def entity(self, entity_id: str) -> Optional[Entity]:
        return self.index.get(entity_id)

    def get_as_type(self, entity_id: str, type_: type[T]) -> Optional[T]:
        entity = self.index.get(entity_id)
        if entity is not None and not isinstance(entity, type_):
            raise ValueError(
                f"ERROR. Entity <{entity_id}> has type {type(entity)} not {type_}"
            )
        return typing.cast(Optional[T], entity)

    def component(self, component_id: str) -> Optional[Component]:
        return self.get_as_type(component_id, Component)

    def data_item(self, data_item_id: str) -> Optional[DataItem]:
        return self.get_as_type(data_item_id, DataItem)

    @property
    def components(self) -> list[Component]:
        return list(self.device.walk())

    @property
    def data_items(self) -> list[DataItem]:
        return list(self.device.all_data_items())

    def resolve(
        self, component: Optional[Component] = None
    ) -> list[ReferenceResolutionError]:
        """Resolve references for every component in the subtree rooted at
        ``component`` (the whole device by default), depth first.

        Safe to call again; each call rebinds from scratch and returns the
        errors found by that call.
        """
        root = self.device if component is None else component
        if self.index.get(root.id) is not root:
            raise DeviceModelError(f"{root} is not part of device {self.device}")
        errors: list[ReferenceResolutionError] = []
        for c in root.walk():
            errors.extend(c.resolve_references(self))
        if root is self.device:
            self.reference_errors = errors
            self._resolved = True
        if errors:
            module_logger.warning(
                "Device %s: %d reference(s) could not be resolved",
                self.device.id,
                len(errors),
            )
        else:
            module_logger.debug("Device %s: all references resolved", self.device.id)
        return errors

    @property
    def resolved(self) -> bool:
        return self._resolved

    def unresolved_references(self) -> list[tuple[Component, Reference]]:
        return [
            (c, reference)
            for c in self.device.walk()
            for reference in c.references
            if not reference.resolved
        ]

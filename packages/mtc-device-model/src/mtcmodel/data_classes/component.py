import logging
import weakref
from collections.abc import Iterator, Mapping
from functools import total_ordering
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional

from mtcmodel.data_classes.attribute_set import AttributeSet
from mtcmodel.data_classes.composition import Composition
from mtcmodel.data_classes.data_item import DataItem
from mtcmodel.data_classes.reference import Reference
from mtcmodel.data_classes.resolver import ReferenceResolver
from mtcmodel.enums import ReferenceKind, WellKnownDataItemType
from mtcmodel.errors import (
    DeviceModelError,
    KindMismatchError,
    PrematureTraversalError,
    ReferenceResolutionError,
    UnresolvedReferenceError,
)
from mtcmodel.property_format import (
    format_sample_interval,
    is_entity_id,
    parse_sample_interval,
)

if TYPE_CHECKING:
    from mtcmodel.data_classes.component_graph import ComponentGraph
    from mtcmodel.data_classes.device import Device

module_logger = logging.getLogger(__name__)


@total_ordering
class Component(ReferenceResolver):
    """
    A Component is a node in a device's hierarchy: an axis, a controller, a
    sensor, or the device itself. It owns its child components, data items,
    compositions and references, and holds only a weak link to its parent.

    The public attribute view is derived from the component's fields. Setters
    that change a field shown in the view mark it stale; it is rebuilt once
    before it is next read.
    """

    def __init__(
        self,
        class_name: str,
        attributes: Mapping[str, str],
        prefix: str = "",
    ) -> None:
        try:
            self._id = is_entity_id(attributes.get("id", ""))
            self._sample_interval = parse_sample_interval(
                attributes.get("sampleInterval") or attributes.get("sampleRate")
            )
        except ValueError as e:
            raise DeviceModelError(f"{class_name} component: {e}") from e
        self._name = attributes.get("name") or None
        self._native_name = attributes.get("nativeName") or None
        self._uuid = attributes.get("uuid") or None
        self._class_name = class_name
        self._prefix = prefix
        self._prefixed_class = f"{prefix}:{class_name}" if prefix else class_name
        self._description: dict[str, str] = {}
        self.description_body = ""
        self.configuration: Optional[str] = None
        self._parent: Optional[weakref.ReferenceType[Component]] = None
        self._device: Optional[weakref.ReferenceType[Device]] = None
        self._children: list[Component] = []
        self._data_items: list[DataItem] = []
        self._compositions: list[Composition] = []
        self._references: list[Reference] = []
        self._well_known: dict[WellKnownDataItemType, DataItem] = {}
        self._attributes: Optional[AttributeSet] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def prefixed_class(self) -> str:
        return self._prefixed_class

    @property
    def native_name(self) -> Optional[str]:
        return self._native_name

    @native_name.setter
    def native_name(self, native_name: Optional[str]) -> None:
        self._native_name = native_name or None
        self._attributes = None

    @property
    def uuid(self) -> Optional[str]:
        return self._uuid

    @uuid.setter
    def uuid(self, uuid: Optional[str]) -> None:
        self._uuid = uuid or None
        self._attributes = None

    @property
    def sample_interval(self) -> Optional[float]:
        return self._sample_interval

    @sample_interval.setter
    def sample_interval(self, sample_interval: Optional[float]) -> None:
        self._sample_interval = parse_sample_interval(sample_interval)
        self._attributes = None

    def _attribute_items(self) -> dict[str, str]:
        items = {"id": self._id}
        if self._name:
            items["name"] = self._name
        if self._native_name:
            items["nativeName"] = self._native_name
        items["class"] = self._class_name
        items["prefixedClass"] = self._prefixed_class
        if self._uuid:
            items["uuid"] = self._uuid
        if self._sample_interval is not None:
            items["sampleInterval"] = format_sample_interval(self._sample_interval)
        return items

    def build_attributes(self) -> AttributeSet:
        return AttributeSet(self._attribute_items())

    def rebuild_attributes(self) -> None:
        self._attributes = self.build_attributes()

    @property
    def attributes(self) -> AttributeSet:
        if self._attributes is None:
            self.rebuild_attributes()
        return self._attributes  # type: ignore[return-value]

    # Description

    @property
    def description(self) -> Mapping[str, str]:
        return MappingProxyType(self._description)

    def add_description(self, body: str, attributes: Mapping[str, str]) -> None:
        self._description.update(attributes)
        self.description_body = body

    def set_manufacturer(self, manufacturer: str) -> None:
        self._description["manufacturer"] = manufacturer

    def set_serial_number(self, serial_number: str) -> None:
        self._description["serialNumber"] = serial_number

    def set_station(self, station: str) -> None:
        self._description["station"] = station

    def set_description(self, body: str) -> None:
        self.description_body = body

    # Tree

    @property
    def parent(self) -> Optional["Component"]:
        if self._parent is None:
            return None
        return self._parent()

    def _attach_to(self, parent: "Component") -> None:
        if self.parent is not None:
            raise DeviceModelError(
                f"{self} already has parent {self.parent}; cannot add it to {parent}"
            )
        self._parent = weakref.ref(parent)
        self._device = None

    def add_child(self, child: "Component") -> None:
        ancestor: Optional[Component] = self
        while ancestor is not None:
            if ancestor is child:
                raise DeviceModelError(
                    f"{child} is {self} or one of its ancestors; cannot add it as a child"
                )
            ancestor = ancestor.parent
        child._attach_to(self)
        self._children.append(child)

    @property
    def children(self) -> tuple["Component", ...]:
        return tuple(self._children)

    @property
    def device(self) -> "Device":
        """The Device at the root of this component's tree.

        Precondition: the component is attached, through its ancestors, to a
        Device. Raises PrematureTraversalError otherwise.
        """
        from mtcmodel.data_classes.device import Device  # noqa: PLC0415

        if self._device is not None:
            device = self._device()
            if device is not None:
                return device
        node: Component = self
        while (parent := node.parent) is not None:
            node = parent
        if not isinstance(node, Device):
            raise PrematureTraversalError(
                f"{self} is not attached to a Device. Its root is {node}"
            )
        self._device = weakref.ref(node)
        return node

    def walk(self) -> Iterator["Component"]:
        """Depth first, in declaration order, starting with self."""
        yield self
        for child in self._children:
            yield from child.walk()

    # Owned entities

    def add_data_item(self, data_item: DataItem) -> None:
        data_item.set_component(self)
        if data_item.type in WellKnownDataItemType.values():
            self._well_known[WellKnownDataItemType(data_item.type)] = data_item
        self._data_items.append(data_item)

    @property
    def data_items(self) -> tuple[DataItem, ...]:
        return tuple(self._data_items)

    def add_composition(self, composition: Composition) -> None:
        composition.set_component(self)
        self._compositions.append(composition)

    @property
    def compositions(self) -> tuple[Composition, ...]:
        return tuple(self._compositions)

    def add_reference(self, reference: Reference) -> None:
        reference.owner_id = self._id
        self._references.append(reference)

    @property
    def references(self) -> tuple[Reference, ...]:
        return tuple(self._references)

    @property
    def availability(self) -> Optional[DataItem]:
        return self._well_known.get(WellKnownDataItemType.Availability)

    @property
    def asset_changed(self) -> Optional[DataItem]:
        return self._well_known.get(WellKnownDataItemType.AssetChanged)

    @property
    def asset_removed(self) -> Optional[DataItem]:
        return self._well_known.get(WellKnownDataItemType.AssetRemoved)

    # Resolution

    def resolve_references(
        self, graph: "ComponentGraph"
    ) -> list[ReferenceResolutionError]:
        """Bind this component's own references against the graph's identity
        index. Children are not visited."""
        errors: list[ReferenceResolutionError] = []
        for reference in self._references:
            reference.unbind()
            entity = graph.entity(reference.id)
            error: ReferenceResolutionError
            if entity is None:
                error = UnresolvedReferenceError(self._id, reference.id, reference.kind)
            elif reference.kind == ReferenceKind.Component and not isinstance(
                entity, Component
            ):
                error = KindMismatchError(
                    self._id, reference.id, reference.kind, type(entity).__name__
                )
            elif reference.kind == ReferenceKind.Channel and not isinstance(
                entity, DataItem
            ):
                error = KindMismatchError(
                    self._id, reference.id, reference.kind, type(entity).__name__
                )
            else:
                reference.bind(entity)
                continue
            module_logger.warning(str(error))
            errors.append(error)
        return errors

    # Identity

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        if not isinstance(other, Component):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other: Any) -> bool:  # noqa: ANN401
        if not isinstance(other, Component):
            return NotImplemented
        return self._id < other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"<{self._prefixed_class} {self._id}>"

import logging
from collections.abc import Mapping
from typing import Optional

from mtcmodel.data_classes.component import Component
from mtcmodel.data_classes.composition import Composition
from mtcmodel.data_classes.data_item import DataItem
from mtcmodel.data_classes.device import Device
from mtcmodel.data_classes.reference import Reference
from mtcmodel.enums import ComponentSpec, ReferenceKind
from mtcmodel.errors import PrematureTraversalError
from mtcmodel.named_types import ComponentGt, CompositionGt, DataItemGt

module_logger = logging.getLogger(__name__)


class DeviceBuilder:
    """Builds device trees in one forward pass over a document.

    Components are opened and closed in document order; references are
    declared against the currently open component and stay unresolved until a
    ComponentGraph resolves them after the device is complete.
    """

    def __init__(self) -> None:
        self._open: list[Component] = []
        self._devices: list[Device] = []

    @classmethod
    def create_component(
        cls,
        class_name: str,
        attributes: Mapping[str, str],
        prefix: str = "",
    ) -> Component:
        if class_name == ComponentSpec.Device:
            return Device(attributes, prefix)
        return Component(class_name, attributes, prefix)

    @property
    def devices(self) -> list[Device]:
        return list(self._devices)

    @property
    def current(self) -> Component:
        if not self._open:
            raise PrematureTraversalError("No component is open")
        return self._open[-1]

    def begin_component(
        self,
        class_name: str,
        attributes: Mapping[str, str],
        prefix: str = "",
    ) -> Component:
        component = self.create_component(class_name, attributes, prefix)
        if self._open:
            self._open[-1].add_child(component)
        elif isinstance(component, Device):
            self._devices.append(component)
        else:
            raise PrematureTraversalError(
                f"{component} must be declared inside a Device"
            )
        self._open.append(component)
        return component

    def end_component(self) -> Component:
        if not self._open:
            raise PrematureTraversalError("end_component() with no open component")
        return self._open.pop()

    def declare_reference(
        self, id: str, name: Optional[str], kind: ReferenceKind | str  # noqa: A002
    ) -> Reference:
        reference = Reference(id, name, kind)
        self.current.add_reference(reference)
        return reference

    def add_data_item(self, gt: DataItemGt) -> DataItem:
        data_item = DataItem(gt)
        self.current.add_data_item(data_item)
        return data_item

    def add_composition(self, gt: CompositionGt) -> Composition:
        composition = Composition(gt)
        self.current.add_composition(composition)
        return composition

    def build(self, decl: ComponentGt) -> Component:
        """Build the declared component and everything below it."""
        component = self.begin_component(decl.Class, decl.Attributes, decl.Prefix)
        if decl.Description is not None:
            component.add_description(decl.Description.Text, decl.Description.Attributes)
        if decl.Configuration is not None:
            component.configuration = decl.Configuration
        for data_item_gt in decl.DataItems:
            self.add_data_item(data_item_gt)
        for composition_gt in decl.Compositions:
            self.add_composition(composition_gt)
        for reference_gt in decl.References:
            self.declare_reference(
                reference_gt.IdRef, reference_gt.Name, reference_gt.Kind
            )
        for child_decl in decl.Components:
            self.build(child_decl)
        return self.end_component()

    def build_device(self, decl: ComponentGt) -> Device:
        if self._open:
            raise PrematureTraversalError(
                f"Cannot start device <{decl.component_id}> inside {self.current}"
            )
        device = self.build(decl)
        if not isinstance(device, Device):
            raise PrematureTraversalError(f"{device} is not a Device")
        module_logger.debug(
            "Built device %s with %d components", device.id, len(list(device.walk()))
        )
        return device

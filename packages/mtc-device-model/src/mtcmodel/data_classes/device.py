from collections.abc import Iterator, Mapping
from typing import Optional

from mtcmodel.data_classes.component import Component
from mtcmodel.data_classes.data_item import DataItem
from mtcmodel.enums import ComponentSpec
from mtcmodel.errors import DeviceModelError


class Device(Component):
    """The root component of a device tree.

    All components and data items below a Device share one identity namespace.
    A Device never has a parent.
    """

    def __init__(self, attributes: Mapping[str, str], prefix: str = "") -> None:
        super().__init__(ComponentSpec.Device.value, attributes, prefix)
        self._iso841_class: Optional[str] = attributes.get("iso841Class") or None
        self._mtconnect_version: Optional[str] = (
            attributes.get("mtconnectVersion") or None
        )

    @property
    def iso841_class(self) -> Optional[str]:
        return self._iso841_class

    @iso841_class.setter
    def iso841_class(self, iso841_class: Optional[str]) -> None:
        self._iso841_class = iso841_class or None
        self._attributes = None

    @property
    def mtconnect_version(self) -> Optional[str]:
        return self._mtconnect_version

    @mtconnect_version.setter
    def mtconnect_version(self, mtconnect_version: Optional[str]) -> None:
        self._mtconnect_version = mtconnect_version or None
        self._attributes = None

    def _attach_to(self, parent: Component) -> None:
        raise DeviceModelError(f"{self} is a Device and cannot be a child of {parent}")

    def _attribute_items(self) -> dict[str, str]:
        items = super()._attribute_items()
        if self.iso841_class:
            items["iso841Class"] = self.iso841_class
        if self.mtconnect_version:
            items["mtconnectVersion"] = self.mtconnect_version
        return items

    def all_data_items(self) -> Iterator[DataItem]:
        for component in self.walk():
            yield from component.data_items

    def device_data_item(self, key: str) -> Optional[DataItem]:
        """Find a data item anywhere in the device by id, then name, then source."""
        items = list(self.all_data_items())
        for attr in ("id", "name", "source"):
            found = next((item for item in items if getattr(item, attr) == key), None)
            if found is not None:
                return found
        return None

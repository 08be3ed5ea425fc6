from mtcmodel.data_classes.attribute_set import AttributeSet
from mtcmodel.data_classes.builder import DeviceBuilder
from mtcmodel.data_classes.component import Component
from mtcmodel.data_classes.component_graph import ComponentGraph
from mtcmodel.data_classes.composition import Composition
from mtcmodel.data_classes.data_item import DataItem
from mtcmodel.data_classes.device import Device
from mtcmodel.data_classes.device_layout import DeviceLayout, DeviceModel, LoadError
from mtcmodel.data_classes.device_store import DeviceModelStore
from mtcmodel.data_classes.reference import Reference
from mtcmodel.data_classes.resolver import ReferenceResolver

__all__ = [
    "AttributeSet",
    "Component",
    "ComponentGraph",
    "Composition",
    "DataItem",
    "Device",
    "DeviceBuilder",
    "DeviceLayout",
    "DeviceModel",
    "DeviceModelStore",
    "LoadError",
    "Reference",
    "ReferenceResolver",
]

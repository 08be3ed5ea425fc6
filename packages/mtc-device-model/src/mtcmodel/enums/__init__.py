"""
Enums shared by the device information model: reference kinds and states,
device document element names, and the data item types components cache links to.
"""

from mtcmodel.enums.component_spec import ComponentSpec
from mtcmodel.enums.data_item_type import WellKnownDataItemType
from mtcmodel.enums.reference_kind import ReferenceKind
from mtcmodel.enums.reference_state import ReferenceState

__all__ = [
    "ComponentSpec",
    "ReferenceKind",
    "ReferenceState",
    "WellKnownDataItemType",
]

from enum import StrEnum

from mtcmodel.enums.component_spec import ComponentSpec


class ReferenceKind(StrEnum):
    """
    What a component reference points at.
    Values:
      - Channel: a data item somewhere in the same device.
      - Component: a component somewhere in the same device.
    """

    Channel = "Channel"
    Component = "Component"

    @classmethod
    def values(cls) -> list[str]:
        """
        Returns enum choices
        """
        return [elt.value for elt in cls]

    @classmethod
    def default(cls) -> "ReferenceKind":
        return cls.Component

    @classmethod
    def from_ref_element(cls, element_name: str) -> "ReferenceKind":
        """Map a reference element name (DataItemRef, ComponentRef) to its kind.
        Kind names themselves pass through."""
        if element_name == ComponentSpec.DataItemRef:
            return cls.Channel
        if element_name == ComponentSpec.ComponentRef:
            return cls.Component
        return cls(element_name)

    @classmethod
    def enum_name(cls) -> str:
        return "reference.kind"

    @classmethod
    def enum_version(cls) -> str:
        return "000"

from enum import StrEnum


class ReferenceState(StrEnum):
    Unresolved = "Unresolved"
    Resolved = "Resolved"

    @classmethod
    def values(cls) -> list[str]:
        return [elt.value for elt in cls]

    @classmethod
    def default(cls) -> "ReferenceState":
        return cls.Unresolved

    @classmethod
    def enum_name(cls) -> str:
        return "reference.state"

    @classmethod
    def enum_version(cls) -> str:
        return "000"

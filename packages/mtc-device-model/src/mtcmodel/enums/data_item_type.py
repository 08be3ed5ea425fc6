from enum import StrEnum


class WellKnownDataItemType(StrEnum):
    """
    Data item types a component keeps convenience links to.
    Values:
      - Availability: whether the component is available to report data.
      - AssetChanged: the id of the last asset added or changed.
      - AssetRemoved: the id of the last asset removed.
    """

    Availability = "AVAILABILITY"
    AssetChanged = "ASSET_CHANGED"
    AssetRemoved = "ASSET_REMOVED"

    @classmethod
    def values(cls) -> list[str]:
        return [elt.value for elt in cls]

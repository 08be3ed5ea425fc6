"""Declaration payloads for the device information model.

These are the already-parsed shapes the document parser hands to the builder.
"""

from mtcmodel.named_types.component_gt import ComponentGt
from mtcmodel.named_types.composition_gt import CompositionGt
from mtcmodel.named_types.data_item_gt import DataItemGt
from mtcmodel.named_types.description_gt import DescriptionGt
from mtcmodel.named_types.reference_gt import ReferenceGt

__all__ = [
    "ComponentGt",
    "CompositionGt",
    "DataItemGt",
    "DescriptionGt",
    "ReferenceGt",
]

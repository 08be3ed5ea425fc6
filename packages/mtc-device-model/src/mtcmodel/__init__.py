from mtcmodel import data_classes
from mtcmodel import enums
from mtcmodel import errors
from mtcmodel import named_types

__all__ = [
    "data_classes",
    "enums",
    "errors",
    "named_types",
]

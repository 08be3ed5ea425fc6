from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mtcmodel.errors import ReferenceResolutionError

if TYPE_CHECKING:
    from mtcmodel.data_classes.component_graph import ComponentGraph


class ReferenceResolver(ABC):
    @abstractmethod
    def resolve_references(
        self, graph: "ComponentGraph"
    ) -> list[ReferenceResolutionError]:
        raise NotImplementedError

import copy
import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from mtcmodel.data_classes.builder import DeviceBuilder
from mtcmodel.data_classes.component import Component
from mtcmodel.data_classes.component_graph import ComponentGraph
from mtcmodel.data_classes.data_item import DataItem
from mtcmodel.data_classes.device import Device
from mtcmodel.enums import ComponentSpec
from mtcmodel.errors import DeviceModelError, ReferenceResolutionError
from mtcmodel.named_types import ComponentGt

module_logger = logging.getLogger(__name__)

DEVICES_KEY = "Devices"


@dataclass
class LoadError:
    type_name: str
    src_dict: dict[Any, Any]
    exception: Exception


@dataclass(frozen=True)
class DeviceModel:
    """A fully built and resolved device, ready to publish."""

    device: Device
    graph: ComponentGraph
    reference_errors: tuple[ReferenceResolutionError, ...] = ()

    @property
    def key(self) -> str:
        return self.device.name or self.device.id


class DeviceLayout:
    layout: dict[Any, Any]
    models: dict[str, DeviceModel]
    errors: list[LoadError]

    @classmethod
    def load_device(
        cls,
        decl: ComponentGt,
        *,
        strict_references: bool = False,
    ) -> DeviceModel:
        device = DeviceBuilder().build_device(decl)
        graph = ComponentGraph(device)
        reference_errors = graph.resolve()
        if strict_references and reference_errors:
            s = f"ERROR in device <{device.id}> references. Caught:\n"
            for error in reference_errors:
                s += f"  {error}\n"
            raise DeviceModelError(s)
        return DeviceModel(
            device=device,
            graph=graph,
            reference_errors=tuple(reference_errors),
        )

    @classmethod
    def check_device_decl(cls, decl: ComponentGt) -> None:
        if decl.Class != ComponentSpec.Device:
            raise DeviceModelError(
                f"Top level component <{decl.component_id}> has Class "
                f"{decl.Class}, not {ComponentSpec.Device}"
            )

    @classmethod
    def check_device_unique_names(cls, decls: list[ComponentGt]) -> None:
        name_counter = Counter(
            decl.Attributes.get("name") or decl.component_id for decl in decls
        )
        dupes = [name for name, count in name_counter.items() if count > 1]
        if dupes:
            raise DeviceModelError(f"Duplicate device name(s) found: {dupes}")

    @classmethod
    def load_devices(
        cls,
        layout: dict[Any, Any],
        *,
        raise_errors: bool = True,
        errors: Optional[list[LoadError]] = None,
        strict_references: bool = False,
    ) -> dict[str, DeviceModel]:
        if errors is None:
            errors = []
        decls: list[ComponentGt] = []
        for device_dict in layout.get(DEVICES_KEY, []):
            try:
                decl = ComponentGt.model_validate(device_dict)
                cls.check_device_decl(decl)
                decls.append(decl)
            except Exception as e:  # noqa: PERF203
                if raise_errors:
                    raise
                errors.append(LoadError("component.gt", device_dict, e))
        try:
            cls.check_device_unique_names(decls)
        except DeviceModelError as e:
            if raise_errors:
                raise
            errors.append(LoadError("device.layout", layout, e))
            return {}
        models: dict[str, DeviceModel] = {}
        for decl in decls:
            try:
                model = cls.load_device(decl, strict_references=strict_references)
                models[model.key] = model
            except Exception as e:  # noqa: PERF203
                if raise_errors:
                    raise
                errors.append(LoadError("component.gt", decl.model_dump(), e))
        return models

    def __init__(
        self,
        layout: dict[Any, Any],
        *,
        models: dict[str, DeviceModel],
        errors: Optional[list[LoadError]] = None,
    ) -> None:
        self.layout = copy.deepcopy(layout)
        self.models = dict(models)
        self.errors = list(errors) if errors else []

    @classmethod
    def load(
        cls,
        layout_path: Path | str,
        *,
        raise_errors: bool = True,
        errors: Optional[list[LoadError]] = None,
        strict_references: bool = False,
    ) -> "DeviceLayout":
        with Path(layout_path).open() as f:
            layout = json.loads(f.read())
        return cls.load_dict(
            layout,
            raise_errors=raise_errors,
            errors=errors,
            strict_references=strict_references,
        )

    @classmethod
    def load_dict(
        cls,
        layout: dict[Any, Any],
        *,
        raise_errors: bool = True,
        errors: Optional[list[LoadError]] = None,
        strict_references: bool = False,
    ) -> "DeviceLayout":
        if errors is None:
            errors = []
        models = cls.load_devices(
            layout,
            raise_errors=raise_errors,
            errors=errors,
            strict_references=strict_references,
        )
        module_logger.info(
            "Loaded %d device(s), %d load error(s)", len(models), len(errors)
        )
        return DeviceLayout(layout, models=models, errors=errors)

    @property
    def devices(self) -> list[Device]:
        return [model.device for model in self.models.values()]

    @property
    def reference_errors(self) -> list[ReferenceResolutionError]:
        return [
            error for model in self.models.values() for error in model.reference_errors
        ]

    def model(self, key: str, default: Any = None) -> Optional[DeviceModel]:  # noqa: ANN401
        """Look up a device model by device name, falling back to id or uuid."""
        if key in self.models:
            return self.models[key]
        return next(
            (
                model
                for model in self.models.values()
                if key in (model.device.id, model.device.uuid)
            ),
            default,
        )

    def device(self, key: str) -> Optional[Device]:
        model = self.model(key)
        if model is None:
            return None
        return model.device

    def graph(self, key: str) -> Optional[ComponentGraph]:
        model = self.model(key)
        if model is None:
            return None
        return model.graph

    def component(self, device_key: str, component_id: str) -> Optional[Component]:
        graph = self.graph(device_key)
        if graph is None:
            return None
        return graph.component(component_id)

    def data_item(self, device_key: str, data_item_id: str) -> Optional[DataItem]:
        graph = self.graph(device_key)
        if graph is None:
            return None
        return graph.data_item(data_item_id)

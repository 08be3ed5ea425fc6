import copy
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from mtcmodel.data_classes import Component, DataItem, DeviceLayout, LoadError
from mtcmodel.errors import (
    DeviceModelError,
    DuplicateIdError,
    UnresolvedReferenceError,
)


def test_load_mill_layout(mill_layout_path: Path) -> None:
    layout = DeviceLayout.load(mill_layout_path)
    assert layout.errors == []
    assert layout.reference_errors == []
    device = layout.device("mill")
    assert device is not None
    assert layout.device("d1") is device
    assert layout.device("mill-001") is device
    assert device.uuid == "mill-001"
    assert device.description["manufacturer"] == "Acme"
    assert device.description_body == "Three axis mill"
    assert device.availability is not None
    assert device.availability.id == "avail"
    assert device.asset_changed is not None
    assert device.asset_removed is not None
    assert [c.id for c in device.children] == ["a1", "c1"]

    axes = layout.component("mill", "a1")
    controller = layout.component("mill", "c1")
    assert isinstance(axes, Component)
    assert controller is not None
    assert controller.configuration == "<SensorConfiguration/>"
    assert [c.id for c in controller.compositions] == ["motor"]
    ctrl_ref, exec_ref = axes.references
    assert ctrl_ref.target is controller
    assert isinstance(exec_ref.target, DataItem)
    assert exec_ref.target is layout.data_item("mill", "exec")
    assert exec_ref.target.component is controller

    xpos = layout.data_item("mill", "xpos")
    assert xpos is not None
    assert xpos.units == "MILLIMETER"
    assert device.device_data_item("X_POS") is xpos
    assert layout.model("lathe") is None
    assert layout.device("lathe") is None


def test_missing_reference_keeps_device_usable(mill_layout: dict[str, Any]) -> None:
    mill_layout["Devices"][0]["Components"][0]["References"].append(
        {"IdRef": "missing-1", "Kind": "Component"}
    )
    layout = DeviceLayout.load_dict(mill_layout)
    assert layout.errors == []
    assert len(layout.reference_errors) == 1
    error = layout.reference_errors[0]
    assert isinstance(error, UnresolvedReferenceError)
    assert error.component_id == "a1"
    assert error.reference_id == "missing-1"
    device = layout.device("mill")
    assert device is not None
    assert layout.component("mill", "p1") is not None


def test_strict_references_fail_the_load(mill_layout: dict[str, Any]) -> None:
    mill_layout["Devices"][0]["Components"][0]["References"].append(
        {"IdRef": "missing-1", "Kind": "Channel"}
    )
    with pytest.raises(DeviceModelError):
        DeviceLayout.load_dict(mill_layout, strict_references=True)


def test_duplicate_id_aborts_device(mill_layout: dict[str, Any]) -> None:
    mill_layout["Devices"][0]["Components"][1]["Attributes"]["id"] = "a1"
    with pytest.raises(DuplicateIdError):
        DeviceLayout.load_dict(mill_layout)


def test_collect_errors_leaves_out_bad_device(mill_layout: dict[str, Any]) -> None:
    good = copy.deepcopy(mill_layout["Devices"][0])
    good["Attributes"] = {"id": "d2", "name": "lathe"}
    for child in good["Components"]:
        child["Attributes"]["id"] += "-l"
    bad = mill_layout["Devices"][0]
    bad["Components"][1]["DataItems"][0]["Id"] = "xpos"
    mill_layout["Devices"].append(good)
    errors: list[LoadError] = []
    layout = DeviceLayout.load_dict(mill_layout, raise_errors=False, errors=errors)
    assert len(errors) == 1
    assert isinstance(errors[0].exception, DuplicateIdError)
    assert layout.device("mill") is None
    assert layout.device("lathe") is not None


def test_bad_declaration(mill_layout: dict[str, Any]) -> None:
    del mill_layout["Devices"][0]["Attributes"]["id"]
    with pytest.raises(ValidationError):
        DeviceLayout.load_dict(mill_layout)
    errors: list[LoadError] = []
    layout = DeviceLayout.load_dict(mill_layout, raise_errors=False, errors=errors)
    assert layout.devices == []
    assert errors[0].type_name == "component.gt"


def test_top_level_must_be_device(mill_layout: dict[str, Any]) -> None:
    mill_layout["Devices"][0]["Class"] = "Axes"
    with pytest.raises(DeviceModelError):
        DeviceLayout.load_dict(mill_layout)


def test_duplicate_device_names(mill_layout: dict[str, Any]) -> None:
    twin = copy.deepcopy(mill_layout["Devices"][0])
    twin["Attributes"]["id"] = "d2"
    mill_layout["Devices"].append(twin)
    with pytest.raises(DeviceModelError):
        DeviceLayout.load_dict(mill_layout)
    errors: list[LoadError] = []
    layout = DeviceLayout.load_dict(mill_layout, raise_errors=False, errors=errors)
    assert layout.models == {}
    assert errors[0].type_name == "device.layout"


def test_each_device_has_its_own_namespace(mill_layout: dict[str, Any]) -> None:
    other = copy.deepcopy(mill_layout["Devices"][0])
    other["Attributes"] = {"id": "d2", "name": "lathe"}
    mill_layout["Devices"].append(other)
    layout = DeviceLayout.load_dict(mill_layout)
    mill_axes = layout.component("mill", "a1")
    lathe_axes = layout.component("lathe", "a1")
    assert mill_axes is not None
    assert lathe_axes is not None
    assert mill_axes is not lathe_axes
    assert mill_axes.references[0].target is layout.component("mill", "c1")
    assert lathe_axes.references[0].target is layout.component("lathe", "c1")


def test_strict_references_with_collected_errors(mill_layout: dict[str, Any]) -> None:
    lathe = copy.deepcopy(mill_layout["Devices"][0])
    lathe["Attributes"] = {"id": "d2", "name": "lathe"}
    mill_layout["Devices"][0]["Components"][0]["References"].append(
        {"IdRef": "missing-1", "Kind": "Component"}
    )
    mill_layout["Devices"].append(lathe)
    errors: list[LoadError] = []
    layout = DeviceLayout.load_dict(
        mill_layout, raise_errors=False, errors=errors, strict_references=True
    )
    assert len(errors) == 1
    assert errors[0].type_name == "component.gt"
    assert isinstance(errors[0].exception, DeviceModelError)
    assert "missing-1" in str(errors[0].exception)
    assert layout.device("mill") is None
    assert layout.device("lathe") is not None
    assert layout.reference_errors == []


def test_reference_element_names_as_kinds(mill_layout: dict[str, Any]) -> None:
    mill_layout["Devices"][0]["Components"][0]["References"] = [
        {"IdRef": "c1", "Kind": "ComponentRef"},
        {"IdRef": "exec", "Kind": "DataItemRef"},
    ]
    layout = DeviceLayout.load_dict(mill_layout)
    ctrl_ref, exec_ref = layout.component("mill", "a1").references  # type: ignore[union-attr]
    assert ctrl_ref.target is layout.component("mill", "c1")
    assert exec_ref.target is layout.data_item("mill", "exec")

import pytest

from mtcmodel.data_classes import Component, ComponentGraph, Device, DeviceBuilder
from mtcmodel.enums import ReferenceKind
from mtcmodel.errors import PrematureTraversalError
from mtcmodel.named_types import ComponentGt, DataItemGt


def test_create_component_picks_device_class() -> None:
    device = DeviceBuilder.create_component("Device", {"id": "d1", "iso841Class": "6"})
    assert isinstance(device, Device)
    assert device.attributes["iso841Class"] == "6"
    axes = DeviceBuilder.create_component("Axes", {"id": "a1"}, "x")
    assert type(axes) is Component
    assert axes.prefixed_class == "x:Axes"


def test_streaming_build_with_forward_references() -> None:
    builder = DeviceBuilder()
    device = builder.begin_component("Device", {"id": "d1"})
    axes = builder.begin_component("Axes", {"id": "a1"})
    ref = builder.declare_reference("c1", "ctrl", ReferenceKind.Component)
    chan = builder.declare_reference("exec", "execution", "Channel")
    builder.end_component()
    controller = builder.begin_component("Controller", {"id": "c1"})
    execution = builder.add_data_item(DataItemGt(Id="exec", Type="EXECUTION"))
    builder.end_component()
    assert builder.end_component() is device

    assert builder.devices == [device]
    assert axes.references == (ref, chan)
    assert not ref.resolved

    ComponentGraph(device).resolve()
    assert ref.target is controller
    assert chan.target is execution


def test_declare_reference_needs_open_component() -> None:
    builder = DeviceBuilder()
    with pytest.raises(PrematureTraversalError):
        builder.declare_reference("c1", None, ReferenceKind.Component)
    with pytest.raises(PrematureTraversalError):
        builder.end_component()


def test_top_level_must_be_device() -> None:
    builder = DeviceBuilder()
    with pytest.raises(PrematureTraversalError):
        builder.begin_component("Axes", {"id": "a1"})


def test_build_follows_document_order() -> None:
    decl = ComponentGt.model_validate(
        {
            "Class": "Device",
            "Attributes": {"id": "d1", "name": "mill"},
            "Components": [
                {"Class": "Axes", "Attributes": {"id": "a"}},
                {"Class": "Controller", "Attributes": {"id": "c"}},
                {"Class": "Door", "Attributes": {"id": "b"}},
            ],
        }
    )
    device = DeviceBuilder().build_device(decl)
    assert [child.id for child in device.children] == ["a", "c", "b"]
    assert all(child.device is device for child in device.children)

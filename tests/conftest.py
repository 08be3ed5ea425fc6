"""Local pytest configuration"""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

MILL_LAYOUT: dict[str, Any] = {
    "Devices": [
        {
            "Class": "Device",
            "Attributes": {
                "id": "d1",
                "name": "mill",
                "uuid": "mill-001",
                "sampleInterval": "10",
            },
            "Description": {
                "Text": "Three axis mill",
                "Attributes": {"manufacturer": "Acme", "serialNumber": "SN-42"},
            },
            "DataItems": [
                {"Id": "avail", "Type": "AVAILABILITY", "Category": "EVENT"},
                {"Id": "asset-chg", "Type": "ASSET_CHANGED", "Category": "EVENT"},
                {"Id": "asset-rem", "Type": "ASSET_REMOVED", "Category": "EVENT"},
            ],
            "Components": [
                {
                    "Class": "Axes",
                    "Attributes": {"id": "a1", "name": "base"},
                    "References": [
                        {"IdRef": "c1", "Name": "ctrl", "Kind": "Component"},
                        {"IdRef": "exec", "Name": "execution", "Kind": "Channel"},
                    ],
                    "Components": [
                        {
                            "Class": "Linear",
                            "Attributes": {"id": "x1", "name": "X"},
                            "DataItems": [
                                {
                                    "Id": "xpos",
                                    "Name": "Xpos",
                                    "Type": "POSITION",
                                    "Category": "SAMPLE",
                                    "Units": "MILLIMETER",
                                    "Source": "X_POS",
                                },
                            ],
                        },
                    ],
                },
                {
                    "Class": "Controller",
                    "Attributes": {"id": "c1", "name": "controller"},
                    "Configuration": "<SensorConfiguration/>",
                    "DataItems": [
                        {"Id": "exec", "Type": "EXECUTION", "Category": "EVENT"},
                    ],
                    "Compositions": [
                        {"Id": "motor", "Type": "MOTOR", "Name": "spindle motor"},
                    ],
                    "Components": [
                        {
                            "Class": "Path",
                            "Attributes": {"id": "p1"},
                            "DataItems": [
                                {"Id": "line", "Type": "LINE", "Category": "EVENT"},
                            ],
                        },
                    ],
                },
            ],
        },
    ],
}


@pytest.fixture
def mill_layout() -> dict[str, Any]:
    return copy.deepcopy(MILL_LAYOUT)


@pytest.fixture
def mill_layout_path(tmp_path: Path, mill_layout: dict[str, Any]) -> Path:
    layout_path = tmp_path / "devices.json"
    with layout_path.open("w") as f:
        f.write(json.dumps(mill_layout, indent=2))
    return layout_path

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from msixpack.core.capability import (
    DECODE_VARIANTS,
    ENCODE_TAGS,
    Capability,
    DeviceCapability,
    RestrictedCapability,
    capability_tag,
)
from msixpack.core.model import (
    Application,
    AppxManifest,
    DefaultTile,
    Properties,
    ShowNameOnTiles,
    TargetDeviceFamily,
    VisualElements,
)
from msixpack.core.naming import output_tag, pascal_case, record_tag
from msixpack.core.wrapper import AbsentElementPolicy, ElementState, SingletonElement


@pytest.mark.parametrize(
    "name, expected",
    [
        ("name", "Name"),
        ("display_name", "DisplayName"),
        ("max_version_tested", "MaxVersionTested"),
        ("processor_architecture", "ProcessorArchitecture"),
        ("id", "Id"),
    ],
)
def test_pascal_case(name: str, expected: str) -> None:
    assert pascal_case(name) == expected


@pytest.mark.parametrize(
    "cls, field, expected",
    [
        (AppxManifest, "ns", "xmlns"),
        (AppxManifest, "ns_rescap", "xmlns:rescap"),
        (AppxManifest, "identity", "Identity"),
        (Application, "visual_elements", "uap:VisualElements"),
        (Application, "entry_point", "EntryPoint"),
        (VisualElements, "logo_150x150", "Square150x150Logo"),
        (VisualElements, "logo_44x44", "Square44x44Logo"),
        (VisualElements, "display_name", "DisplayName"),
        (DefaultTile, "logo_71x71", "Square71x71Logo"),
        (DefaultTile, "logo_310x310", "Square310x310Logo"),
        (DefaultTile, "logo_310x150", "Wide310x150Logo"),
        (DefaultTile, "show_names_on_tiles", "uap:ShowNameOnTiles"),
        (ShowNameOnTiles, "show_on", "uap:ShowOn"),
        (TargetDeviceFamily, "min_version", "MinVersion"),
        (Properties, "publisher_display_name", "PublisherDisplayName"),
    ],
)
def test_output_tag_prefers_override_table(cls: type, field: str, expected: str) -> None:
    assert output_tag(cls, field) == expected


def test_record_tags() -> None:
    assert record_tag(AppxManifest) == "Package"
    assert record_tag(Properties) == "Properties"


def test_capability_tables_are_independent_and_asymmetric() -> None:
    assert DECODE_VARIANTS == {
        "capability": Capability,
        "restricted": RestrictedCapability,
        "device": DeviceCapability,
    }
    assert ENCODE_TAGS == {
        Capability: "Capability",
        RestrictedCapability: "rescap:Capability",
        DeviceCapability: "DeviceCapability",
    }
    assert set(DECODE_VARIANTS).isdisjoint(ENCODE_TAGS.values())


def test_capability_tag_uses_exact_type() -> None:
    class Custom(Capability):
        pass

    assert capability_tag(Capability("x")) == "Capability"
    assert capability_tag(Custom("x")) is None
    assert capability_tag("Capability") is None


@pytest.mark.parametrize(
    "value, state",
    [(None, ElementState.ABSENT), ("", ElementState.EMPTY), ("x", ElementState.PRESENT)],
)
def test_singleton_element_state(value: object, state: ElementState) -> None:
    assert SingletonElement(value).state is state


def _render(value: object, policy: AbsentElementPolicy) -> str:
    parent = ET.Element("P")
    SingletonElement(value).render(parent, "Tag", policy)
    return ET.tostring(parent, encoding="unicode", short_empty_elements=False)


def test_singleton_element_rendering() -> None:
    assert _render("x", AbsentElementPolicy.OMIT) == "<P><Tag>x</Tag></P>"
    assert _render("", AbsentElementPolicy.OMIT) == "<P><Tag></Tag></P>"
    assert _render(None, AbsentElementPolicy.OMIT) == "<P></P>"
    assert _render(None, AbsentElementPolicy.EMIT) == "<P><Tag></Tag></P>"


def test_singleton_element_renders_exactly_one_child() -> None:
    parent = ET.Element("P")
    child = SingletonElement("v").render(parent, "Tag")

    assert len(parent) == 1
    assert child is parent[0]

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from conftest import make_manifest_input, write_json
from msixpack.core.capability import Capability, DeviceCapability, RestrictedCapability
from msixpack.core.defaults import FOUNDATION_NAMESPACE, RESCAP_NAMESPACE, UAP_NAMESPACE
from msixpack.core.errors import (
    FieldTypeError,
    MissingRequiredFieldError,
    UnknownFieldError,
    UnrecognizedVariantError,
)
from msixpack.core.model import ShowNameOnTiles, TargetDeviceFamily
from msixpack.io.manifest_input import decode_manifest, load_manifest_mapping, read_manifest_file


def _dig(obj: Any, path: list[Any]) -> Any:
    for key in path:
        obj = obj[key]
    return obj


def test_decode_full_input_builds_typed_model() -> None:
    m = decode_manifest(make_manifest_input())

    assert m.identity.name == "com.flutter.fluttertodoapp"
    assert m.identity.processor_architecture == "x64"
    assert m.properties.description == "A new Flutter project."
    assert m.resources.resource[0].language == "en"
    assert m.resources.resource[0].scale is None

    app = m.applications.application[0]
    assert app.id == "fluttertodoapp"
    assert app.visual_elements.logo_150x150 == "Images\\Square150x150Logo.png"
    tile = app.visual_elements.default_tile
    assert tile is not None
    assert [s.tile for s in tile.show_names_on_tiles.show_on] == [
        "square150x150Logo",
        "square310x310Logo",
        "wide310x150Logo",
    ]
    assert app.visual_elements.lock_screen is not None
    assert app.visual_elements.lock_screen.notification == "badge"

    # namespaces default to the compatibility constants
    assert (m.ns, m.ns_uap, m.ns_rescap) == (FOUNDATION_NAMESPACE, UAP_NAMESPACE, RESCAP_NAMESPACE)


def test_decode_preserves_capability_order_and_variants() -> None:
    caps = [
        {"device": {"name": "webcam"}},
        {"capability": {"name": "internetClient"}},
        {"restricted": {"name": "runFullTrust"}},
        {"capability": {"name": "privateNetworkClientServer"}},
    ]
    m = decode_manifest(make_manifest_input(capabilities=caps))

    assert m.capabilities == (
        DeviceCapability("webcam"),
        Capability("internetClient"),
        RestrictedCapability("runFullTrust"),
        Capability("privateNetworkClientServer"),
    )


@pytest.mark.parametrize(
    "container_path, container_name",
    [
        ([], "AppxManifest"),
        (["identity"], "Identity"),
        (["properties"], "Properties"),
        (["resources"], "Resources"),
        (["resources", "resource", 0], "Resource"),
        (["dependencies"], "Dependencies"),
        (["dependencies", "target_device_family", 0], "TargetDeviceFamily"),
        (["applications"], "Applications"),
        (["applications", "application", 0], "Application"),
        (["applications", "application", 0, "visual_elements"], "VisualElements"),
        (["applications", "application", 0, "visual_elements", "default_tile"], "DefaultTile"),
        (
            ["applications", "application", 0, "visual_elements", "default_tile", "show_names_on_tiles"],
            "ShowNameOnTiles",
        ),
        (
            ["applications", "application", 0, "visual_elements", "default_tile", "show_names_on_tiles", "show_on", 1],
            "ShowOn",
        ),
        (["applications", "application", 0, "visual_elements", "splash_screen"], "SplashScreen"),
        (["applications", "application", 0, "visual_elements", "lock_screen"], "LockScreen"),
        (["capabilities", 1, "restricted"], "RestrictedCapability"),
    ],
)
def test_unknown_field_at_any_depth_is_rejected(container_path: list[Any], container_name: str) -> None:
    obj = make_manifest_input()
    _dig(obj, container_path)["surprise_field"] = "x"

    with pytest.raises(UnknownFieldError) as ei:
        decode_manifest(obj)

    assert ei.value.field == "surprise_field"
    assert ei.value.container == container_name
    assert "surprise_field" in str(ei.value)


def test_unknown_field_path_names_the_location() -> None:
    obj = make_manifest_input()
    obj["applications"]["application"][0]["visual_elements"]["Logo_44x44"] = "typo"

    with pytest.raises(UnknownFieldError, match=r"unknown field 'Logo_44x44' in VisualElements") as ei:
        decode_manifest(obj)
    assert ei.value.path == "applications.application[0].visual_elements"


def test_output_form_tags_are_not_accepted_as_input() -> None:
    obj = make_manifest_input()
    obj["identity"] = {"Name": "x", "Version": "1.0.0.0", "Publisher": "CN=x"}

    with pytest.raises(UnknownFieldError, match=r"'Name'"):
        decode_manifest(obj)


@pytest.mark.parametrize(
    "container_path, field",
    [
        (["identity"], "publisher"),
        (["properties"], "display_name"),
        (["properties"], "logo"),
        (["applications", "application", 0], "id"),
        (["applications", "application", 0], "visual_elements"),
        (["applications", "application", 0, "visual_elements"], "background_color"),
        (["applications", "application", 0, "visual_elements", "splash_screen"], "image"),
        (["dependencies", "target_device_family", 0], "max_version_tested"),
    ],
)
def test_missing_required_field_is_rejected(container_path: list[Any], field: str) -> None:
    obj = make_manifest_input()
    del _dig(obj, container_path)[field]

    with pytest.raises(MissingRequiredFieldError) as ei:
        decode_manifest(obj)
    assert ei.value.field == field


def test_null_required_field_counts_as_missing() -> None:
    obj = make_manifest_input()
    obj["identity"]["version"] = None

    with pytest.raises(MissingRequiredFieldError, match=r"missing required field 'version' in Identity"):
        decode_manifest(obj)


@pytest.mark.parametrize("key", ["identity", "properties", "applications"])
def test_missing_required_top_level_element(key: str) -> None:
    with pytest.raises(MissingRequiredFieldError) as ei:
        decode_manifest(make_manifest_input(**{key: None}))
    assert ei.value.field == key
    assert ei.value.container == "AppxManifest"


def test_optional_fields_absent_decode_to_none_not_defaults() -> None:
    obj = make_manifest_input()
    del obj["identity"]["processor_architecture"]
    del obj["properties"]["description"]
    ve = obj["applications"]["application"][0]["visual_elements"]
    del ve["default_tile"]
    del ve["lock_screen"]
    del obj["applications"]["application"][0]["executable"]

    m = decode_manifest(obj)

    assert m.identity.processor_architecture is None
    assert m.properties.description is None
    assert m.applications.application[0].executable is None
    assert m.applications.application[0].visual_elements.default_tile is None
    assert m.applications.application[0].visual_elements.lock_screen is None


def test_absent_sequences_become_empty() -> None:
    m = decode_manifest(make_manifest_input(resources=None, capabilities=None))

    assert m.resources.resource == ()
    assert m.capabilities == ()


def test_absent_dependencies_default_to_desktop_family() -> None:
    expected = TargetDeviceFamily("Windows.Desktop", "10.0.16300.0", "10.0.20348.0")

    m1 = decode_manifest(make_manifest_input(dependencies=None))
    m2 = decode_manifest(make_manifest_input(dependencies={}))

    assert m1.dependencies.target_device_family == (expected,)
    assert m2.dependencies.target_device_family == (expected,)


def test_absent_show_names_on_tiles_decodes_to_empty_container() -> None:
    obj = make_manifest_input()
    del obj["applications"]["application"][0]["visual_elements"]["default_tile"]["show_names_on_tiles"]

    m = decode_manifest(obj)

    tile = m.applications.application[0].visual_elements.default_tile
    assert tile is not None
    assert tile.show_names_on_tiles == ShowNameOnTiles(show_on=())


def test_explicit_namespaces_override_defaults() -> None:
    m = decode_manifest(make_manifest_input(ns="urn:test:foundation"))

    assert m.ns == "urn:test:foundation"
    assert m.ns_uap == UAP_NAMESPACE


@pytest.mark.parametrize("variant", ["Capability", "rescap:Capability", "DeviceCapability", "restrictedCapability"])
def test_unrecognized_capability_variant(variant: str) -> None:
    obj = make_manifest_input(capabilities=[{"capability": {"name": "a"}}, {variant: {"name": "b"}}])

    with pytest.raises(UnrecognizedVariantError) as ei:
        decode_manifest(obj)
    assert ei.value.discriminator == variant
    assert ei.value.path == "capabilities[1]"


def test_capability_entry_with_two_discriminators_is_rejected() -> None:
    obj = make_manifest_input(capabilities=[{"capability": {"name": "a"}, "device": {"name": "b"}}])

    with pytest.raises(UnrecognizedVariantError, match=r"'capability,device'"):
        decode_manifest(obj)


def test_capability_without_name_is_rejected() -> None:
    obj = make_manifest_input(capabilities=[{"device": {}}])

    with pytest.raises(MissingRequiredFieldError, match=r"'name' in DeviceCapability"):
        decode_manifest(obj)


@pytest.mark.parametrize(
    "mutate, field",
    [
        (lambda o: o["identity"].__setitem__("version", 1), "version"),
        (lambda o: o["resources"]["resource"][0].__setitem__("scale", "100"), "scale"),
        (lambda o: o["resources"]["resource"][0].__setitem__("scale", -1), "scale"),
        (lambda o: o["resources"]["resource"][0].__setitem__("scale", True), "scale"),
        (lambda o: o["resources"].__setitem__("resource", {"language": "en"}), "resource"),
        (lambda o: o.__setitem__("identity", ["x"]), "identity"),
        (lambda o: o.__setitem__("capabilities", {"capability": {"name": "x"}}), "capabilities"),
    ],
)
def test_wrong_value_shapes_are_rejected(mutate: Any, field: str) -> None:
    obj = make_manifest_input()
    mutate(obj)

    with pytest.raises(FieldTypeError) as ei:
        decode_manifest(obj)
    assert ei.value.field == field


def test_scale_accepts_unsigned_int() -> None:
    obj = make_manifest_input(resources={"resource": [{"scale": 200}, {"dx_feature_level": "dx11"}]})

    m = decode_manifest(obj)

    assert m.resources.resource[0].scale == 200
    assert m.resources.resource[1].dx_feature_level == "dx11"


def test_non_mapping_document_is_rejected() -> None:
    with pytest.raises(FieldTypeError, match=r"expected mapping, got NoneType"):
        decode_manifest(None)


def test_validate_flag_controls_cardinality_checks() -> None:
    obj = make_manifest_input(applications={"application": []})

    m = decode_manifest(obj, validate=False)
    assert m.applications.application == ()


def test_json_and_yaml_inputs_decode_identically(tmp_path: Path) -> None:
    obj = make_manifest_input()
    json_path = write_json(tmp_path / "manifest.json", obj)
    yaml_path = tmp_path / "manifest.yaml"
    yaml_path.write_text(yaml.safe_dump(obj, sort_keys=False), encoding="utf-8")

    assert read_manifest_file(json_path) == read_manifest_file(yaml_path)


def test_yaml_capability_list_syntax(tmp_path: Path) -> None:
    text = "\n".join(
        [
            "identity: {name: demo, version: 1.0.0.0, publisher: CN=demo}",
            "properties: {display_name: Demo, publisher_display_name: Demo Inc, logo: logo.png}",
            "capabilities:",
            "  - capability: {name: internetClient}",
            "  - restricted:",
            "      name: runFullTrust",
            "applications:",
            "  application:",
            "    - id: demo",
            "      visual_elements:",
            "        display_name: Demo",
            "        description: Demo app",
            "        background_color: transparent",
            "        logo_150x150: a.png",
            "        logo_44x44: b.png",
            "",
        ]
    )
    p = tmp_path / "manifest.yml"
    p.write_text(text, encoding="utf-8")

    m = read_manifest_file(p)

    assert m.capabilities == (Capability("internetClient"), RestrictedCapability("runFullTrust"))
    assert m.properties.description is None


def test_unsupported_input_suffix(tmp_path: Path) -> None:
    p = tmp_path / "manifest.toml"
    p.write_text("", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported manifest input format '.toml'"):
        load_manifest_mapping(p)


def test_field_table_entry_without_record_type_is_rejected() -> None:
    from msixpack.core.schema import FieldKind, FieldSpec
    from msixpack.io.manifest_input import _decode_field

    spec = FieldSpec("resource", FieldKind.SEQUENCE)

    with pytest.raises(TypeError, match=r"Resources.resource: SEQUENCE field has no record type"):
        _decode_field([{}], spec, container="Resources", path="resources.resource")


def test_model_and_decoder_share_the_device_family_default() -> None:
    from msixpack.core.defaults import default_device_families
    from msixpack.core.model import Dependencies
    from msixpack.core.schema import record_fields

    (spec,) = record_fields(Dependencies)

    assert spec.default is default_device_families
    assert Dependencies().target_device_family == default_device_families()
    assert decode_manifest(make_manifest_input(dependencies={})).dependencies == Dependencies()

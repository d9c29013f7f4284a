"""Declarative field tables for every manifest record.

Both directions are driven from these tables:
- the decoder uses `name`, `required`, `kind` and the default factory
- the encoder uses `kind` and field order (the output schema is order-sensitive)

Field order here is the *output* order, which is not necessarily the
dataclass declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from msixpack.core.defaults import (
    FOUNDATION_NAMESPACE,
    RESCAP_NAMESPACE,
    UAP_NAMESPACE,
    default_device_families,
)
from msixpack.core.model import (
    Application,
    Applications,
    AppxManifest,
    DefaultTile,
    Dependencies,
    Identity,
    LockScreen,
    Properties,
    Resource,
    Resources,
    ShowNameOnTiles,
    ShowOn,
    SplashScreen,
    TargetDeviceFamily,
    VisualElements,
)


class FieldKind(str, Enum):
    ATTRIBUTE = "attribute"  # scalar rendered as an XML attribute
    ELEMENT = "element"  # scalar rendered as a single wrapped child element
    RECORD = "record"  # nested record rendered as a child element
    SEQUENCE = "sequence"  # repeated records rendered as sibling child elements
    CAPABILITIES = "capabilities"  # polymorphic capability list


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: FieldKind
    required: bool = False
    scalar: type = str
    record: Optional[type] = None
    default: Optional[Callable[[], Any]] = None
    omit_when_empty: bool = False


def _attr(name: str, *, required: bool = False, scalar: type = str, default: Callable[[], Any] | None = None) -> FieldSpec:
    return FieldSpec(name, FieldKind.ATTRIBUTE, required=required, scalar=scalar, default=default)


def _element(name: str, *, required: bool = False) -> FieldSpec:
    return FieldSpec(name, FieldKind.ELEMENT, required=required)


def _record(
    name: str,
    record: type,
    *,
    required: bool = False,
    default: Callable[[], Any] | None = None,
    omit_when_empty: bool = False,
) -> FieldSpec:
    return FieldSpec(
        name,
        FieldKind.RECORD,
        required=required,
        record=record,
        default=default,
        omit_when_empty=omit_when_empty,
    )


def _sequence(name: str, record: type, *, default: Callable[[], Any] | None = None) -> FieldSpec:
    return FieldSpec(name, FieldKind.SEQUENCE, record=record, default=default)


RECORD_FIELDS: dict[type, tuple[FieldSpec, ...]] = {
    AppxManifest: (
        _attr("ns", default=lambda: FOUNDATION_NAMESPACE),
        _attr("ns_uap", default=lambda: UAP_NAMESPACE),
        _attr("ns_rescap", default=lambda: RESCAP_NAMESPACE),
        _record("identity", Identity, required=True),
        _record("properties", Properties, required=True),
        _record("resources", Resources, default=Resources),
        _record("dependencies", Dependencies, default=Dependencies),
        FieldSpec("capabilities", FieldKind.CAPABILITIES),
        _record("applications", Applications, required=True),
    ),
    Identity: (
        _attr("name", required=True),
        _attr("version", required=True),
        _attr("publisher", required=True),
        _attr("processor_architecture"),
    ),
    Properties: (
        _element("display_name", required=True),
        _element("publisher_display_name", required=True),
        _element("logo", required=True),
        _element("description"),
    ),
    Resources: (_sequence("resource", Resource),),
    Resource: (
        _attr("language"),
        _attr("scale", scalar=int),
        _attr("dx_feature_level"),
    ),
    Dependencies: (_sequence("target_device_family", TargetDeviceFamily, default=default_device_families),),
    TargetDeviceFamily: (
        _attr("name", required=True),
        _attr("min_version", required=True),
        _attr("max_version_tested", required=True),
    ),
    Applications: (_sequence("application", Application),),
    Application: (
        _attr("id", required=True),
        _attr("executable"),
        _attr("entry_point"),
        _record("visual_elements", VisualElements, required=True),
    ),
    VisualElements: (
        _attr("display_name", required=True),
        _attr("description", required=True),
        _attr("background_color", required=True),
        _attr("logo_150x150", required=True),
        _attr("logo_44x44", required=True),
        _record("default_tile", DefaultTile),
        _record("splash_screen", SplashScreen),
        _record("lock_screen", LockScreen),
    ),
    DefaultTile: (
        _attr("short_name"),
        _attr("logo_71x71"),
        _attr("logo_310x310"),
        _attr("logo_310x150"),
        _record("show_names_on_tiles", ShowNameOnTiles, default=ShowNameOnTiles, omit_when_empty=True),
    ),
    ShowNameOnTiles: (_sequence("show_on", ShowOn),),
    ShowOn: (_attr("tile", required=True),),
    SplashScreen: (_attr("image", required=True),),
    LockScreen: (
        _attr("badge_logo", required=True),
        _attr("notification", required=True),
    ),
}


def record_fields(record_cls: type) -> tuple[FieldSpec, ...]:
    """Return the field table of a record class (KeyError for non-records)."""
    try:
        return RECORD_FIELDS[record_cls]
    except KeyError:
        raise KeyError(f"not a manifest record type: {record_cls.__name__}") from None


__all__ = [
    "FieldKind",
    "FieldSpec",
    "RECORD_FIELDS",
    "record_fields",
]

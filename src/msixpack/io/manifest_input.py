"""Manifest input-form reader (JSON / YAML).

The input form is the mapping produced by upstream build tooling, using
lowercase `snake_case` keys that mirror `msixpack.core.model`:

    identity: {name: ..., version: ..., publisher: ...}
    properties: {display_name: ..., publisher_display_name: ..., logo: ...}
    resources: {resource: [{language: en}]}
    dependencies: {target_device_family: [...]}        # optional
    capabilities:
      - capability: {name: internetClient}
      - restricted: {name: runFullTrust}
      - device: {name: location}
    applications: {application: [{id: ..., visual_elements: {...}}]}

Decoder policy:
- strict: any key not declared for its containing record hard-errors
  (`UnknownFieldError`); upstream schema drift must never be dropped silently
- required keys that are missing or null raise `MissingRequiredFieldError`
- optional keys that are missing or null decode to `None`
- repeated keys that are missing decode to `()`, except where the field table
  declares a default (`dependencies`, `target_device_family`, namespaces)
- with `validate=True` (default) the result passes `validate_manifest()`
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from msixpack.core.capability import DECODE_VARIANTS
from msixpack.core.errors import (
    FieldTypeError,
    MissingRequiredFieldError,
    UnknownFieldError,
    UnrecognizedVariantError,
)
from msixpack.core.model import AppxManifest
from msixpack.core.schema import FieldKind, FieldSpec, record_fields
from msixpack.core.validate import validate_manifest

logger = logging.getLogger(__name__)

_MISSING = object()


def _type_name(value: Any) -> str:
    return type(value).__name__


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _require_mapping(value: Any, *, field: str, container: str, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise FieldTypeError(field, container, expected="mapping", actual=_type_name(value), path=path)
    return value


def _require_list(value: Any, *, field: str, container: str, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise FieldTypeError(field, container, expected="list", actual=_type_name(value), path=path)
    return value


def _decode_scalar(value: Any, spec: FieldSpec, *, container: str, path: str) -> Any:
    if spec.scalar is int:
        # bool is an int subclass; YAML `yes`/`no` must not slip through as 1/0
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldTypeError(spec.name, container, expected="unsigned int", actual=_type_name(value), path=path)
        if value < 0:
            raise FieldTypeError(spec.name, container, expected="unsigned int", actual=str(value), path=path)
        return value
    if not isinstance(value, str):
        raise FieldTypeError(spec.name, container, expected="str", actual=_type_name(value), path=path)
    return value


def _decode_capability(item: Any, *, path: str) -> Any:
    entry = _require_mapping(item, field="capabilities", container="AppxManifest", path=path)
    if len(entry) != 1:
        raise UnrecognizedVariantError(",".join(sorted(str(k) for k in entry)) or "<empty>", path=path)
    tag, body = next(iter(entry.items()))
    variant = DECODE_VARIANTS.get(tag)
    if variant is None:
        raise UnrecognizedVariantError(str(tag), path=path)
    where = _join(path, tag)
    body = _require_mapping(body, field=tag, container="capabilities", path=where)
    for key in body:
        if key != "name":
            raise UnknownFieldError(str(key), variant.__name__, path=where)
    name = body.get("name")
    if name is None:
        raise MissingRequiredFieldError("name", variant.__name__, path=where)
    if not isinstance(name, str):
        raise FieldTypeError("name", variant.__name__, expected="str", actual=_type_name(name), path=where)
    return variant(name=name)


def _nested_record(spec: FieldSpec, *, container: str) -> type:
    if spec.record is None:
        raise TypeError(f"{container}.{spec.name}: {spec.kind.name} field has no record type")
    return spec.record


def _decode_field(value: Any, spec: FieldSpec, *, container: str, path: str) -> Any:
    if spec.kind in (FieldKind.ATTRIBUTE, FieldKind.ELEMENT):
        return _decode_scalar(value, spec, container=container, path=path)
    if spec.kind is FieldKind.RECORD:
        return decode_record(_nested_record(spec, container=container), value, path=path)
    if spec.kind is FieldKind.SEQUENCE:
        record_cls = _nested_record(spec, container=container)
        items = _require_list(value, field=spec.name, container=container, path=path)
        return tuple(decode_record(record_cls, item, path=f"{path}[{i}]") for i, item in enumerate(items))
    if spec.kind is FieldKind.CAPABILITIES:
        items = _require_list(value, field=spec.name, container=container, path=path)
        return tuple(_decode_capability(item, path=f"{path}[{i}]") for i, item in enumerate(items))
    raise TypeError(f"{container}.{spec.name}: unhandled field kind {spec.kind.name}")


def decode_record(record_cls: type, obj: Any, *, path: str = "") -> Any:
    """Decode one input mapping into an instance of `record_cls`.

    Unknown keys are checked before required keys so that a misspelled required
    field reports the misspelling rather than the absence.
    """
    container = record_cls.__name__
    field_name = path.rsplit(".", 1)[-1] if path else container
    mapping = _require_mapping(obj, field=field_name, container=container, path=path)
    specs = record_fields(record_cls)

    known = {spec.name for spec in specs}
    for key in mapping:
        if key not in known:
            raise UnknownFieldError(str(key), container, path=path)

    kwargs: dict[str, Any] = {}
    for spec in specs:
        where = _join(path, spec.name)
        raw = mapping.get(spec.name, _MISSING)
        if raw is _MISSING or raw is None:
            if spec.required:
                raise MissingRequiredFieldError(spec.name, container, path=where)
            if spec.default is not None:
                kwargs[spec.name] = spec.default()
            elif spec.kind in (FieldKind.SEQUENCE, FieldKind.CAPABILITIES):
                kwargs[spec.name] = ()
            else:
                kwargs[spec.name] = None
            continue
        kwargs[spec.name] = _decode_field(raw, spec, container=container, path=where)
    return record_cls(**kwargs)


def decode_manifest(obj: Any, *, validate: bool = True) -> AppxManifest:
    """Decode an input-form mapping into an `AppxManifest`.

    Args:
        obj: Parsed JSON/YAML document (a mapping).
        validate: If True (default), enforce cardinality bounds after decoding.
    """
    manifest = decode_record(AppxManifest, obj)
    logger.debug(
        "decoded manifest %s: %d application(s), %d capability(ies)",
        manifest.identity.name,
        len(manifest.applications.application),
        len(manifest.capabilities),
    )
    if validate:
        validate_manifest(manifest)
    return manifest


def load_manifest_mapping(path: str | Path) -> Any:
    """Load the raw input document from a `.json`, `.yaml` or `.yml` file."""
    p = Path(path)
    suffix = p.suffix.lower()
    text = p.read_text(encoding="utf-8")
    if suffix == ".json":
        return json.loads(text)
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    raise ValueError(f"{p}: unsupported manifest input format {suffix!r} (expected .json, .yaml or .yml)")


def read_manifest_file(path: str | Path, *, validate: bool = True) -> AppxManifest:
    """Read and decode a manifest input file."""
    logger.debug("reading manifest input %s", path)
    return decode_manifest(load_manifest_mapping(path), validate=validate)


__all__ = [
    "decode_manifest",
    "decode_record",
    "load_manifest_mapping",
    "read_manifest_file",
]

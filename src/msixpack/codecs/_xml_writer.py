"""Internal element builders for the `AppxManifest.xml` codec.

This module turns model records into an `xml.etree.ElementTree` tree:
- field kinds and order come from `msixpack.core.schema`
- tag names come from `msixpack.core.naming` (override table, then PascalCase)
- capability tags come from `msixpack.core.capability.ENCODE_TAGS`

This is a private module; public API is in `appx_xml.py`.
"""

from __future__ import annotations

import io
import re
import xml.etree.ElementTree as ET
from typing import Any, Optional

from msixpack.core.capability import capability_tag
from msixpack.core.errors import ManifestEncodingError
from msixpack.core.naming import output_tag
from msixpack.core.schema import RECORD_FIELDS, FieldKind, FieldSpec, record_fields
from msixpack.core.wrapper import AbsentElementPolicy, SingletonElement

# complement of the XML 1.0 `Char` production; ElementTree writes these unescaped
_INVALID_XML_CHAR = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _scalar_text(value: Any, spec: FieldSpec, *, field: str) -> str:
    """Validate a scalar model value and return its text form."""
    if spec.scalar is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ManifestEncodingError(field, f"expected unsigned int, got {type(value).__name__}")
        if value < 0:
            raise ManifestEncodingError(field, f"expected unsigned int, got {value}")
        return str(value)
    if not isinstance(value, str):
        raise ManifestEncodingError(field, f"expected str, got {type(value).__name__}")
    return _check_xml_text(value, field=field)


def _check_xml_text(text: str, *, field: str) -> str:
    """Return `text` unchanged, or raise if it holds a character XML 1.0 cannot represent."""
    m = _INVALID_XML_CHAR.search(text)
    if m is not None:
        raise ManifestEncodingError(field, f"invalid XML character U+{ord(m.group()):04X} at offset {m.start()}")
    return text


def _is_empty_record(record: Any) -> bool:
    """True if every field of `record` is None or an empty sequence."""
    for spec in record_fields(type(record)):
        value = getattr(record, spec.name)
        if spec.kind in (FieldKind.SEQUENCE, FieldKind.CAPABILITIES):
            if value:
                return False
        elif value is not None:
            return False
    return True


def _require_record(value: Any, expected: Optional[type], *, field: str) -> Any:
    if expected is not None and type(value) is not expected:
        raise ManifestEncodingError(field, f"expected {expected.__name__}, got {type(value).__name__}")
    if type(value) not in RECORD_FIELDS:
        raise ManifestEncodingError(field, f"not a manifest record: {type(value).__name__}")
    return value


def _append_capabilities(parent: ET.Element, tag: str, caps: Any, *, field: str) -> None:
    if not isinstance(caps, (tuple, list)):
        raise ManifestEncodingError(field, f"expected a sequence, got {type(caps).__name__}")
    if not caps:
        return
    container = ET.SubElement(parent, tag)
    for i, cap in enumerate(caps):
        where = f"{field}[{i}]"
        cap_tag = capability_tag(cap)
        if cap_tag is None:
            raise ManifestEncodingError(where, f"not a capability variant: {type(cap).__name__}")
        name = getattr(cap, "name", None)
        if not isinstance(name, str):
            raise ManifestEncodingError(f"{where}.name", f"expected str, got {type(name).__name__}")
        _check_xml_text(name, field=f"{where}.name")
        ET.SubElement(container, cap_tag, {output_tag(type(cap), "name"): name})


def _build_element(
    parent: Optional[ET.Element],
    tag: str,
    record: Any,
    *,
    policy: AbsentElementPolicy,
    path: str,
) -> ET.Element:
    """Render `record` as `<tag>` (appended to `parent` when given)."""
    elem = ET.Element(tag) if parent is None else ET.SubElement(parent, tag)
    cls = type(record)

    for spec in record_fields(cls):
        value = getattr(record, spec.name)
        where = _join(path, spec.name)
        child_tag = output_tag(cls, spec.name)

        if spec.kind is FieldKind.ATTRIBUTE:
            if value is None and spec.default is not None:
                value = spec.default()
            if value is None:
                if spec.required:
                    raise ManifestEncodingError(where, "required value is absent")
                continue
            elem.set(child_tag, _scalar_text(value, spec, field=where))

        elif spec.kind is FieldKind.ELEMENT:
            if value is not None:
                _scalar_text(value, spec, field=where)
            SingletonElement(value).render(elem, child_tag, policy)

        elif spec.kind is FieldKind.RECORD:
            if value is None:
                if spec.required:
                    raise ManifestEncodingError(where, "required element is absent")
                continue
            _require_record(value, spec.record, field=where)
            if spec.omit_when_empty and _is_empty_record(value):
                continue
            _build_element(elem, child_tag, value, policy=policy, path=where)

        elif spec.kind is FieldKind.SEQUENCE:
            if not isinstance(value, (tuple, list)):
                raise ManifestEncodingError(where, f"expected a sequence, got {type(value).__name__}")
            for i, item in enumerate(value):
                item_where = f"{where}[{i}]"
                _require_record(item, spec.record, field=item_where)
                _build_element(elem, child_tag, item, policy=policy, path=item_where)

        elif spec.kind is FieldKind.CAPABILITIES:
            _append_capabilities(elem, child_tag, value, field=where)

    return elem


def _serialize(root: ET.Element, *, pretty: bool, xml_declaration: bool) -> bytes:
    """Serialize to UTF-8; empty elements are written as `<Tag></Tag>`."""
    if pretty:
        ET.indent(root, space="  ")
    buf = io.BytesIO()
    ET.ElementTree(root).write(
        buf,
        encoding="utf-8",
        xml_declaration=xml_declaration,
        short_empty_elements=False,
    )
    return buf.getvalue()

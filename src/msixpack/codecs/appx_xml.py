"""`AppxManifest.xml` codec (export).

Renders an `AppxManifest` model into the output form consumed by the Windows
installer:

- root element `<Package>` carrying `xmlns`, `xmlns:uap`, `xmlns:rescap`
  (the compatibility constants are used when a namespace field is None)
- scalar fields as attributes, in field-table order; absent optional ones omitted
- `Properties` strings as singleton child elements
- nested records as child elements, repeated records as sibling elements
- capabilities under `<Capabilities>`, tagged per variant
  (`Capability` | `rescap:Capability` | `DeviceCapability`)

Output is deterministic: the same model always yields the same bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from msixpack.core.model import AppxManifest
from msixpack.core.naming import record_tag
from msixpack.core.validate import validate_manifest
from msixpack.core.wrapper import AbsentElementPolicy

from msixpack.codecs._xml_writer import _build_element, _require_record, _serialize

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "AppxManifest.xml"


@dataclass(frozen=True)
class EncodeOptions:
    """Rendering options.

    absent_elements: what to do with an absent singleton-element field
        (`OMIT` drops the element; `EMIT` writes an empty one, matching older
        manifest generators).
    pretty: indent the output with two spaces.
    xml_declaration: prefix documents with `<?xml ...?>` (ignored by `encode_record`).
    validate: run `validate_manifest()` before rendering an `AppxManifest`.
    """

    absent_elements: AbsentElementPolicy = AbsentElementPolicy.OMIT
    pretty: bool = False
    xml_declaration: bool = True
    validate: bool = True


def _render(record: Any, options: EncodeOptions, *, xml_declaration: bool) -> bytes:
    _require_record(record, None, field=type(record).__name__)
    if options.validate and isinstance(record, AppxManifest):
        validate_manifest(record)
    root = _build_element(
        None,
        record_tag(type(record)),
        record,
        policy=options.absent_elements,
        path="",
    )
    return _serialize(root, pretty=options.pretty, xml_declaration=xml_declaration)


def encode_record(record: Any, options: Optional[EncodeOptions] = None) -> str:
    """Render any model record as a standalone element (no XML declaration).

    Example:
        >>> encode_record(Properties("", "", "", ""))
        '<Properties><DisplayName></DisplayName><PublisherDisplayName></PublisherDisplayName><Logo></Logo><Description></Description></Properties>'
    """
    opts = options or EncodeOptions()
    return _render(record, opts, xml_declaration=False).decode("utf-8")


def encode_manifest(manifest: AppxManifest, options: Optional[EncodeOptions] = None) -> str:
    """Render a full `AppxManifest.xml` document."""
    opts = options or EncodeOptions()
    if not isinstance(manifest, AppxManifest):
        raise TypeError(f"encode_manifest: expected AppxManifest, got {type(manifest).__name__}")
    data = _render(manifest, opts, xml_declaration=opts.xml_declaration)
    logger.debug("encoded manifest %s (%d bytes)", manifest.identity.name, len(data))
    return data.decode("utf-8")


def write_appx_manifest(
    path: str | Path,
    manifest: AppxManifest,
    options: Optional[EncodeOptions] = None,
) -> Path:
    """Write `AppxManifest.xml` to `path` (a file path, or a directory to write into).

    Returns the path written. The file ends with a newline; newline translation
    is disabled so output bytes are identical across platforms.
    """
    out_path = Path(path)
    if out_path.is_dir():
        out_path = out_path / MANIFEST_FILENAME
    text = encode_manifest(manifest, options) + "\n"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.debug("wrote %s", out_path)
    return out_path


__all__ = [
    "EncodeOptions",
    "MANIFEST_FILENAME",
    "encode_manifest",
    "encode_record",
    "write_appx_manifest",
]

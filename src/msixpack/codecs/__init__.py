"""Codecs for the manifest output form.

- `AppxManifest.xml` export lives in [`appx_xml`](appx_xml.py:1).
- Reading `AppxManifest.xml` back is out of scope; the input form is read by
  `msixpack.io`.
"""

from __future__ import annotations

from .appx_xml import EncodeOptions, encode_manifest, encode_record, write_appx_manifest

__all__ = [
    "EncodeOptions",
    "encode_manifest",
    "encode_record",
    "write_appx_manifest",
]

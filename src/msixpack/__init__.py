"""msixpack: APPX/MSIX package manifest model and codec.

Decodes the loosely-specified manifest input form produced by build tooling
(JSON/YAML, strict field checking) and renders a schema-exact
`AppxManifest.xml`.
"""

from __future__ import annotations

from msixpack.codecs import EncodeOptions, encode_manifest, write_appx_manifest
from msixpack.core import AppxManifest, ManifestError
from msixpack.io import decode_manifest, read_manifest_file

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AppxManifest",
    "EncodeOptions",
    "ManifestError",
    "decode_manifest",
    "encode_manifest",
    "read_manifest_file",
    "write_appx_manifest",
]

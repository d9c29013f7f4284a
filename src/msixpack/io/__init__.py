"""msixpack I/O helpers.

Reads the manifest input form (JSON/YAML) through the strict decoder in
[`manifest_input`](manifest_input.py:1).
"""

from __future__ import annotations

from .manifest_input import decode_manifest, decode_record, load_manifest_mapping, read_manifest_file

__all__ = [
    "decode_manifest",
    "decode_record",
    "load_manifest_mapping",
    "read_manifest_file",
]

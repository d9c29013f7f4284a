"""Render demo workspace: input mapping -> AppxManifest.xml -> JSON report.

Self-contained (no repo-level assets). Builds a demo Flutter-style manifest
input, writes it as YAML under `outputs/`, decodes it with the strict decoder,
renders `outputs/AppxManifest.xml` twice and checks the bytes are identical.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from msixpack.codecs.appx_xml import EncodeOptions, write_appx_manifest
from msixpack.io.manifest_input import read_manifest_file


def _demo_input() -> dict[str, Any]:
    return {
        "identity": {
            "name": "com.flutter.fluttertodoapp",
            "version": "1.0.0.0",
            "publisher": "CN=Msix Testing, O=Msix Testing Corporation, S=Some-State, C=US",
            "processor_architecture": "x64",
        },
        "properties": {
            "display_name": "fluttertodoapp",
            "publisher_display_name": "com.flutter.fluttertodoapp",
            "logo": "Images\\StoreLogo.png",
            "description": "A new Flutter project.",
        },
        "resources": {"resource": [{"language": "en"}]},
        "capabilities": [
            {"capability": {"name": "internetClient"}},
            {"restricted": {"name": "runFullTrust"}},
            {"device": {"name": "location"}},
        ],
        "applications": {
            "application": [
                {
                    "id": "fluttertodoapp",
                    "executable": "todoapp.exe",
                    "entry_point": "Windows.FullTrustApplication",
                    "visual_elements": {
                        "background_color": "transparent",
                        "display_name": "fluttertodoapp",
                        "description": "A new flutter project.",
                        "logo_44x44": "Images\\Square44x44Logo.png",
                        "logo_150x150": "Images\\Square150x150Logo.png",
                    },
                }
            ]
        },
    }


def main() -> None:
    here = Path(__file__).resolve().parent
    outputs = here / "outputs"
    outputs.mkdir(parents=True, exist_ok=True)

    input_path = outputs / "manifest.yaml"
    input_path.write_text(yaml.safe_dump(_demo_input(), sort_keys=False), encoding="utf-8")

    manifest = read_manifest_file(input_path)
    options = EncodeOptions(pretty=True)
    out_a = write_appx_manifest(outputs / "AppxManifest.xml", manifest, options)
    out_b = write_appx_manifest(outputs / "AppxManifest.again.xml", manifest, options)

    report = {
        "input": str(input_path.relative_to(here)),
        "output": str(out_a.relative_to(here)),
        "deterministic": out_a.read_bytes() == out_b.read_bytes(),
        "capabilities": [type(c).__name__ for c in manifest.capabilities],
        "target_device_family": [tdf.min_version for tdf in manifest.dependencies.target_device_family],
    }
    (outputs / "report.json").write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    print(json.dumps(report, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()

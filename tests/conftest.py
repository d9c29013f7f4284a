"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import msixpack` to fail.

To keep the suite robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import copy
import json
import sys
from pathlib import Path
from typing import Any


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers for manifest tests
# =============================================================================


_DEMO_INPUT: dict[str, Any] = {
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
    "dependencies": {
        "target_device_family": [
            {"name": "Windows.Desktop", "min_version": "10.0.16300.0", "max_version_tested": "10.0.20348.0"}
        ]
    },
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
                    "default_tile": {
                        "short_name": "fluttertodoapp",
                        "logo_71x71": "Images\\SmallTile.png",
                        "logo_310x310": "Images\\LargeTile.png",
                        "logo_310x150": "Images\\Wide310x150Logo.png",
                        "show_names_on_tiles": {
                            "show_on": [
                                {"tile": "square150x150Logo"},
                                {"tile": "square310x310Logo"},
                                {"tile": "wide310x150Logo"},
                            ]
                        },
                    },
                    "splash_screen": {"image": "Images\\SplashScreen.png"},
                    "lock_screen": {"badge_logo": "Images\\BadgeLogo.png", "notification": "badge"},
                },
            }
        ]
    },
}


def make_manifest_input(**overrides: Any) -> dict[str, Any]:
    """Return a fresh, fully-populated manifest input mapping.

    Top-level keys can be replaced via keyword arguments; pass `None` to drop a key.
    """
    obj = copy.deepcopy(_DEMO_INPUT)
    for key, value in overrides.items():
        if value is None:
            obj.pop(key, None)
        else:
            obj[key] = value
    return obj


def make_application(app_id: str) -> dict[str, Any]:
    """Minimal valid application entry."""
    return {
        "id": app_id,
        "visual_elements": {
            "display_name": app_id,
            "description": app_id,
            "background_color": "transparent",
            "logo_150x150": "Images\\Square150x150Logo.png",
            "logo_44x44": "Images\\Square44x44Logo.png",
        },
    }


def write_json(path: Path, obj: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path

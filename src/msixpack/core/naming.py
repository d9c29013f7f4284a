"""Output tag naming for manifest fields.

Input fields are lowercase `snake_case`. On output every field name is
converted to PascalCase unless `TAG_OVERRIDES` declares an explicit tag for it
(namespaced tags such as `uap:VisualElements`, or re-cased ones such as
`Square150x150Logo`). The override table is consulted first; there are no other
special cases in the encoder.
"""

from __future__ import annotations

from typing import Final

# (record class name, field name) -> output tag
TAG_OVERRIDES: Final[dict[tuple[str, str], str]] = {
    ("AppxManifest", "ns"): "xmlns",
    ("AppxManifest", "ns_uap"): "xmlns:uap",
    ("AppxManifest", "ns_rescap"): "xmlns:rescap",
    ("Resource", "scale"): "uap:Scale",
    ("Resource", "dx_feature_level"): "uap:DXFeatureLevel",
    ("Application", "visual_elements"): "uap:VisualElements",
    ("VisualElements", "logo_150x150"): "Square150x150Logo",
    ("VisualElements", "logo_44x44"): "Square44x44Logo",
    ("VisualElements", "default_tile"): "uap:DefaultTile",
    ("VisualElements", "splash_screen"): "uap:SplashScreen",
    ("VisualElements", "lock_screen"): "uap:LockScreen",
    ("DefaultTile", "logo_71x71"): "Square71x71Logo",
    ("DefaultTile", "logo_310x310"): "Square310x310Logo",
    ("DefaultTile", "logo_310x150"): "Wide310x150Logo",
    ("DefaultTile", "show_names_on_tiles"): "uap:ShowNameOnTiles",
    ("ShowNameOnTiles", "show_on"): "uap:ShowOn",
}

# Tag used when a record is rendered on its own (document root or standalone).
RECORD_TAGS: Final[dict[str, str]] = {
    "AppxManifest": "Package",
}


def pascal_case(name: str) -> str:
    """`max_version_tested` -> `MaxVersionTested`."""
    return "".join(word[:1].upper() + word[1:] for word in name.split("_") if word)


def output_tag(record_cls: type, field_name: str) -> str:
    """Return the output tag of `field_name` declared on `record_cls`."""
    override = TAG_OVERRIDES.get((record_cls.__name__, field_name))
    if override is not None:
        return override
    return pascal_case(field_name)


def record_tag(record_cls: type) -> str:
    return RECORD_TAGS.get(record_cls.__name__, record_cls.__name__)


__all__ = [
    "RECORD_TAGS",
    "TAG_OVERRIDES",
    "output_tag",
    "pascal_case",
    "record_tag",
]

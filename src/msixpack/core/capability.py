"""Capability variants.

A capability is a closed three-way choice. The input form and the output form
use *different* tag vocabularies for the same variant:

    input discriminator   variant                 output tag
    -------------------   ----------------------  -------------------
    capability            Capability              Capability
    restricted            RestrictedCapability    rescap:Capability
    device                DeviceCapability        DeviceCapability

The two directions are kept as two independent tables; neither is derived from
the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Capability:
    """General capability (`internetClient`, ...)."""

    name: str


@dataclass(frozen=True)
class RestrictedCapability:
    """Restricted capability (`runFullTrust`, ...), declared in the rescap namespace."""

    name: str


@dataclass(frozen=True)
class DeviceCapability:
    """Device capability (`location`, `webcam`, ...)."""

    name: str


AnyCapability = Union[Capability, RestrictedCapability, DeviceCapability]

DECODE_VARIANTS: dict[str, type] = {
    "capability": Capability,
    "restricted": RestrictedCapability,
    "device": DeviceCapability,
}

ENCODE_TAGS: dict[type, str] = {
    Capability: "Capability",
    RestrictedCapability: "rescap:Capability",
    DeviceCapability: "DeviceCapability",
}


def capability_tag(cap: object) -> str | None:
    """Return the output tag for a capability instance, or None if not a known variant.

    Lookup is by exact type so that subclasses never inherit a tag.
    """
    return ENCODE_TAGS.get(type(cap))


__all__ = [
    "AnyCapability",
    "Capability",
    "RestrictedCapability",
    "DeviceCapability",
    "DECODE_VARIANTS",
    "ENCODE_TAGS",
    "capability_tag",
]

"""Singleton-element rendering for scalar fields.

Some scalar fields (the `Properties` strings) must appear as exactly one child
element carrying the value as text, never as an attribute:

    <Properties><DisplayName>App</DisplayName>...</Properties>

`SingletonElement` distinguishes three states of the wrapped value:

- ABSENT: the field is `None`
- EMPTY: the field is `""` (renders `<Tag></Tag>`)
- PRESENT: any other string

Older manifest generators always emitted the element, even for an absent
value, producing an empty element where the schema expects content.
`AbsentElementPolicy` makes that choice explicit: `OMIT` (default) drops the
element, `EMIT` keeps the legacy output.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ElementState(str, Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    PRESENT = "present"


class AbsentElementPolicy(str, Enum):
    OMIT = "omit"
    EMIT = "emit"


@dataclass(frozen=True)
class SingletonElement:
    value: Optional[str]

    @property
    def state(self) -> ElementState:
        if self.value is None:
            return ElementState.ABSENT
        if self.value == "":
            return ElementState.EMPTY
        return ElementState.PRESENT

    def render(
        self,
        parent: ET.Element,
        tag: str,
        policy: AbsentElementPolicy = AbsentElementPolicy.OMIT,
    ) -> ET.Element | None:
        """Append exactly one `<tag>` child to `parent`, or none for an omitted absent value."""
        if self.state is ElementState.ABSENT and policy is AbsentElementPolicy.OMIT:
            return None
        child = ET.SubElement(parent, tag)
        # text "" (not None) keeps the element rendered as <Tag></Tag>
        child.text = self.value if self.value is not None else ""
        return child


__all__ = [
    "AbsentElementPolicy",
    "ElementState",
    "SingletonElement",
]

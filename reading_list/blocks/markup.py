# reading_list/blocks/markup.py
"""
A small structured builder for block markup.

Output is assembled from typed fragments and joined once at the end.
``Text`` is always escaped, attribute values are always escaped, and
only ``Raw`` passes trusted HTML (entry bodies) through unchanged.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Union


@dataclass(frozen=True)
class Text:
    value: str

    def render(self) -> str:
        return html.escape(self.value, quote=False)


@dataclass(frozen=True)
class Raw:
    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class Open:
    tag: str
    attributes: Mapping[str, Optional[str]] = field(default_factory=dict)
    void: bool = False

    def render(self) -> str:
        attrs = render_attributes(self.attributes)
        head = f"<{self.tag} {attrs}" if attrs else f"<{self.tag}"
        return head + (" />" if self.void else ">")


@dataclass(frozen=True)
class Close:
    tag: str

    def render(self) -> str:
        return f"</{self.tag}>"


Fragment = Union[Text, Raw, Open, Close]


def render_attributes(attributes: Mapping[str, Optional[str]]) -> str:
    """Render ``name="value"`` pairs; ``None`` values are dropped."""
    parts = []
    for name, value in attributes.items():
        if value is None:
            continue
        parts.append(f'{html.escape(name)}="{html.escape(str(value), quote=True)}"')
    return " ".join(parts)


class MarkupBuilder:
    def __init__(self) -> None:
        self._fragments: List[Fragment] = []
        self._stack: List[str] = []

    @property
    def fragments(self) -> List[Fragment]:
        return list(self._fragments)

    def open(self, tag: str, attributes: Optional[Mapping[str, Optional[str]]] = None) -> "MarkupBuilder":
        self._fragments.append(Open(tag, dict(attributes or {})))
        self._stack.append(tag)
        return self

    def close(self) -> "MarkupBuilder":
        self._fragments.append(Close(self._stack.pop()))
        return self

    def element(self, tag: str, text: str, attributes: Optional[Mapping[str, Optional[str]]] = None) -> "MarkupBuilder":
        return self.open(tag, attributes).text(text).close()

    def void(self, tag: str, attributes: Mapping[str, Optional[str]]) -> "MarkupBuilder":
        self._fragments.append(Open(tag, dict(attributes), void=True))
        return self

    def text(self, value: str) -> "MarkupBuilder":
        self._fragments.append(Text(value))
        return self

    def raw(self, value: str) -> "MarkupBuilder":
        if value:
            self._fragments.append(Raw(value))
        return self

    def build(self) -> str:
        if self._stack:
            raise ValueError(f"unclosed elements: {self._stack}")
        return "".join(f.render() for f in self._fragments)


def block_class_name(block_name: str) -> str:
    """``my-reading-list/my-reading-list`` -> ``wp-block-my-reading-list-my-reading-list``.

    Core blocks drop their namespace: ``core/list`` -> ``wp-block-list``.
    """
    if block_name.startswith("core/"):
        block_name = block_name[len("core/"):]
    return "wp-block-" + block_name.replace("/", "-")


def block_wrapper_attributes(block_name: str, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Wrapper attributes for a block's outer element.

    The generated block class is merged in front of any ``class`` the
    layout passes; every other attribute passes through unchanged.
    """
    attrs: Dict[str, str] = {}
    extra = dict(extra or {})
    classes = [block_class_name(block_name)]
    if extra.get("class"):
        classes.extend(c for c in extra.pop("class").split() if c not in classes)
    else:
        extra.pop("class", None)
    attrs["class"] = " ".join(classes)
    attrs.update(extra)
    return attrs

"""Shape element parsing and serialization."""

import re

from .utils import DEFS_PATTERN, parse_attributes, parse_style

SHAPE_TAGS = ("path", "circle", "rect", "ellipse", "polygon", "line", "polyline")
GROUP_TAG = "g"

# Matches a <defs> block (left untouched), a group end tag, or a group/shape start tag
SHAPE_PATTERN = re.compile(
    r"(?P<defs>" + DEFS_PATTERN.pattern + r")"
    r"|(?P<end></" + GROUP_TAG + r"\s*>)"
    r"|<(?P<tag>" + "|".join((GROUP_TAG,) + SHAPE_TAGS) + r")\b"
    r"(?P<attrs>(?:\"[^\"]*\"|'[^']*'|[^'\">])*?)"
    r"(?P<close>/?)>",
    re.DOTALL | re.IGNORECASE,
)

# Style declarations moved onto attributes before paint is rewritten
PAINT_PROPERTIES = ("fill", "stroke", "stroke-width")

# A newly added paint attribute is placed next to its counterpart
_COUNTERPART = {"fill": "stroke", "stroke": "fill"}


class ShapeElement:
    """One shape or group start tag with an ordered attribute map.

    Only fill, stroke, stroke-width and paint declarations in style are
    ever changed; every other attribute keeps its value and position.
    """

    def __init__(self, tag: str, attributes: dict[str, str | None], self_closing: bool = True):
        self.tag = tag
        self.attributes = attributes
        self.self_closing = self_closing

    @classmethod
    def from_match(cls, match: re.Match) -> "ShapeElement":
        """Build a ShapeElement from a SHAPE_PATTERN match."""
        return cls(
            tag=match.group("tag"),
            attributes=parse_attributes(match.group("attrs")),
            self_closing=bool(match.group("close")),
        )

    def has(self, name: str) -> bool:
        return name in self.attributes

    def remove(self, name: str) -> None:
        self.attributes.pop(name, None)

    @property
    def is_group(self) -> bool:
        return self.tag.lower() == GROUP_TAG

    def hoist_style_paint(self) -> None:
        """Move fill/stroke/stroke-width style declarations onto attributes.

        Inline style wins over presentation attributes, so a hoisted value
        replaces any attribute of the same name. The style attribute is
        dropped once nothing else is left in it.
        """
        style = self.attributes.get("style")
        if not style:
            return

        declarations = parse_style(style)
        paint = [(name, value) for name, value in declarations if name in PAINT_PROPERTIES]
        if not paint:
            return

        rest = [(name, value) for name, value in declarations if name not in PAINT_PROPERTIES]
        if rest:
            self.attributes["style"] = ";".join(f"{name}:{value}" for name, value in rest)
        else:
            self.remove("style")
        for name, value in paint:
            self.set(name, value.replace("!important", "").strip())

    def set(self, name: str, value: str) -> None:
        """Set an attribute, keeping its position if it already exists.

        A new fill is inserted before an existing stroke, a new stroke right
        after an existing fill. Otherwise the attribute goes first.
        """
        if name in self.attributes:
            self.attributes[name] = value
            return

        items = list(self.attributes.items())
        counterpart = _COUNTERPART.get(name)
        index = 0
        for i, (key, _) in enumerate(items):
            if key == counterpart:
                index = i if name == "fill" else i + 1
                break
        items.insert(index, (name, value))
        self.attributes = dict(items)

    def to_markup(self) -> str:
        """Serialize back to a start tag."""
        parts = [self.tag]
        for name, value in self.attributes.items():
            if value is None:
                parts.append(name)
            elif '"' in value:
                parts.append(f"{name}='{value}'")
            else:
                parts.append(f'{name}="{value}"')
        closing = "/>" if self.self_closing else ">"
        return "<" + " ".join(parts) + closing

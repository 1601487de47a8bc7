"""Ordered, multi-valued HTML attribute sets."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from .errors import FormatError

AttributeInput = Union[None, str, Mapping[Any, Any], "AttributeSet"]

_PAIR_RE = re.compile(r'\s*([^\s="]+)="([^"]*)"')


def parse_attribute_string(text: str) -> Dict[str, str]:
    """Parse ``'class="a b" id="c"'`` into ``{"class": "a b", "id": "c"}``.

    Repeated names have their values joined with a space, so
    ``'class="a" class="b"'`` gives ``{"class": "a b"}``.
    """
    pairs: Dict[str, str] = {}
    pos = 0
    end = len(text.rstrip())
    while pos < end:
        match = _PAIR_RE.match(text, pos)
        if match is None:
            raise FormatError(
                f"Malformed attribute string at column {pos}: {text[pos:]!r}"
            )
        name, value = match.group(1), match.group(2)
        if name in pairs:
            pairs[name] = f"{pairs[name]} {value}"
        else:
            pairs[name] = value
        pos = match.end()
        if pos < end and not text[pos].isspace():
            raise FormatError(
                f"Expected whitespace after {name!r} at column {pos}: {text!r}"
            )
    return pairs


def _split_value(value: Any) -> List[str]:
    if value is None:
        return [""]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return str(value).split() or [""]


def normalize_attributes(new: AttributeInput) -> Dict[str, List[str]]:
    """Turn any accepted attribute input into ``{name: [values]}``."""
    if new is None:
        return {}
    if isinstance(new, AttributeSet):
        return new.to_dict()
    if isinstance(new, str):
        new = parse_attribute_string(new)
    elif not isinstance(new, Mapping):
        raise FormatError(f"Unsupported attribute input: {new!r}")

    formatted: Dict[str, List[str]] = {}
    for key, value in new.items():
        name = str(key)
        formatted.setdefault(name, []).extend(_split_value(value))
    return formatted


def _merge_values(old: List[str], new: List[str]) -> List[str]:
    # An empty value only holds the name in place until real tokens arrive.
    if not new or new == [""]:
        return old or [""]
    if old == [""]:
        return list(new)
    return old + new


class AttributeSet:
    """Attribute names mapped to lists of values, rendered as ``name="v1 v2"``.

    Adding to an existing name appends to its values instead of overwriting
    them; every name present maps to at least one value.
    """

    def __init__(self, initial: AttributeInput = None) -> None:
        self._content: Dict[str, List[str]] = {}
        self.add(initial)

    def add(self, new: AttributeInput) -> "AttributeSet":
        self._merge(normalize_attributes(new))
        return self

    def _merge(self, formatted: Dict[str, List[str]]) -> None:
        for name, values in formatted.items():
            if name in self._content:
                self._content[name] = _merge_values(self._content[name], values)
            else:
                self._content[name] = _merge_values([], values)

    def delete(self, names: Union[str, Iterable[str]]) -> "AttributeSet":
        """Remove one name or a list of names; absent names are ignored."""
        if isinstance(names, str):
            names = [names]
        for name in names:
            self._content.pop(str(name), None)
        return self

    def replace(self, new: AttributeInput) -> "AttributeSet":
        """Overwrite the names present in ``new`` and leave the rest alone."""
        formatted = normalize_attributes(new)
        self.delete(list(formatted))
        self._merge(formatted)
        return self

    def set(self, name: str, value: Any) -> "AttributeSet":
        return self.replace({name: value})

    def get(self, name: str) -> Optional[List[str]]:
        values = self._content.get(str(name))
        return list(values) if values is not None else None

    def clear(self) -> "AttributeSet":
        self._content.clear()
        return self

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(values) for name, values in self._content.items()}

    def render(self) -> str:
        return " ".join(
            f'{name}="{" ".join(values)}"' for name, values in self._content.items()
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"AttributeSet({self.to_dict()!r})"

    def __contains__(self, name: object) -> bool:
        return str(name) in self._content

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._content))

    def __len__(self) -> int:
        return len(self._content)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeSet):
            return list(self._content.items()) == list(other._content.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


__all__ = ["AttributeInput", "AttributeSet", "normalize_attributes", "parse_attribute_string"]

import os
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator

import orjson


class GroupKind(StrEnum):
    FILE = "file"
    MODEL = "model"
    GROUP = "group"


# Kind assumed for a node that doesn't name one, by depth
_DEFAULT_KINDS = (GroupKind.FILE, GroupKind.MODEL)


@dataclass
class Attribute:
    key: str
    value: str


@dataclass
class Group:
    kind: GroupKind
    name: str | None = None
    attributes: list[Attribute] = field(default_factory=list)
    groups: list["Group"] = field(default_factory=list)

    def add_group(self, kind: GroupKind = GroupKind.GROUP, name: str | None = None) -> "Group":
        group = Group(kind, name)
        self.groups.append(group)
        return group

    def add_attribute(self, key: str, value: str) -> Attribute:
        attribute = Attribute(key, value)
        self.attributes.append(attribute)
        return attribute


@dataclass
class Store:
    """Owns the scene tree. Roots are File groups."""

    roots: list[Group] = field(default_factory=list)

    def add_file(self, name: str | None = None) -> Group:
        file = Group(GroupKind.FILE, name)
        self.roots.append(file)
        return file

    def __iter__(self) -> Iterator[Group]:
        return iter(self.roots)

    @staticmethod
    def from_dict(data: dict) -> "Store":
        return Store([_group_from_dict(file, 0) for file in data.get("files", [])])


def load_store(filepath: os.PathLike | str) -> Store:
    with open(filepath, "rb") as file:
        return Store.from_dict(orjson.loads(file.read()))


def _group_from_dict(data: dict, depth: int) -> Group:
    if "kind" in data:
        kind = GroupKind(data["kind"])
    else:
        kind = _DEFAULT_KINDS[depth] if depth < len(_DEFAULT_KINDS) else GroupKind.GROUP

    attributes = data.get("attributes", [])
    if isinstance(attributes, dict):
        attributes = attributes.items()

    return Group(
        kind,
        data.get("name"),
        [Attribute(str(key), str(value)) for key, value in attributes],
        [_group_from_dict(child, depth + 1) for child in data.get("groups", [])],
    )

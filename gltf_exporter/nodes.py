from typing import Iterable

from gltf_exporter.gltf.exceptions import UnexpectedGroupKindException
from gltf_exporter.store import Group, GroupKind


class NodeProjector:
    """
    Flattens the scene tree into the glTF ``nodes`` array.

    Only Group nodes become glTF nodes. Files and Models are walked without
    emitting anything, so Groups directly under a Model end up as scene roots.
    Nodes are appended in post-order: a parent is appended after its whole
    subtree, so its ``children`` only point at already assigned indices.
    """

    def __init__(self, include_attributes: bool = True):
        self.include_attributes = include_attributes
        self.nodes: list[dict] = []

    def process_roots(self, files: Iterable[Group]) -> list[int]:
        root_nodes: list[int] = []
        for file in files:
            self.process_file(file, root_nodes)

        return root_nodes

    def process_file(self, file: Group, siblings: list[int]) -> None:
        _check_kind(file, GroupKind.FILE)
        for model in file.groups:
            self.process_model(model, siblings)

    def process_model(self, model: Group, siblings: list[int]) -> None:
        _check_kind(model, GroupKind.MODEL)
        for group in model.groups:
            siblings.append(self.process_group(group))

    def process_group(self, group: Group) -> int:
        _check_kind(group, GroupKind.GROUP)

        # (group, pending children, indices of finished children)
        stack = [(group, iter(group.groups), [])]
        index = -1
        while stack:
            current, pending, children = stack[-1]
            child = next(pending, None)
            if child is not None:
                _check_kind(child, GroupKind.GROUP)
                stack.append((child, iter(child.groups), []))
                continue

            stack.pop()
            index = self._append_node(current, children)
            if stack:
                stack[-1][2].append(index)

        return index

    def _append_node(self, group: Group, children: list[int]) -> int:
        node: dict = {}
        if group.name is not None:
            node["name"] = group.name

        if self.include_attributes and group.attributes:
            node["extras"] = {
                attribute.key: attribute.value for attribute in group.attributes
            }

        if children:
            node["children"] = children

        index = len(self.nodes)
        self.nodes.append(node)

        return index


def _check_kind(group: Group, expected: GroupKind) -> None:
    if group.kind != expected:
        raise UnexpectedGroupKindException(
            f"Expected a {expected} node, got {group.kind} ({group.name!r})",
            stage=f"{expected} traversal",
        )

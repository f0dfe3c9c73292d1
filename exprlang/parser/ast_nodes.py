"""
Abstract Syntax Tree node definitions for exprlang.

The tree is built from a closed set of three node shapes:

- Leaf    - an item, literal or END marker
- Binary  - function calls and operator chains
- ListNode - ordered argument lists

Every node owns its children, is never mutated after construction and
compares structurally, so parsing the same text twice yields equal trees.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple


class NodeKind(Enum):
    """Short type discriminator for each node shape."""
    LEAF = "leaf"
    BINARY = "binary"
    LIST = "list"


@dataclass(frozen=True)
class Data:
    """Tagged value carried by AST nodes."""
    data_type: str
    value: str

    def __str__(self) -> str:
        return self.value


EMPTY_DATA = Data("", "")
END_DATA = Data("END", "END")


class ASTVisitor(ABC):
    """Visitor over the closed set of node shapes."""

    def visit(self, node: 'ASTNode') -> Any:
        return node.accept(self)

    @abstractmethod
    def visit_leaf(self, node: 'Leaf') -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: 'Binary') -> Any:
        pass

    @abstractmethod
    def visit_list(self, node: 'ListNode') -> Any:
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    kind: NodeKind

    @abstractmethod
    def get_value(self) -> Data:
        """Get the tagged value of this node."""

    @abstractmethod
    def repr_text(self) -> str:
        """Diagnostic one-line representation (without the outer brackets)."""

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes in order."""

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""

    def get_type(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return f"[ {self.repr_text()} ]"


@dataclass(frozen=True)
class Leaf(ASTNode):
    """Terminal node: an item, a literal, or the END marker."""
    value: Data
    name: str

    kind = NodeKind.LEAF

    @classmethod
    def end(cls) -> 'Leaf':
        return cls(END_DATA, "END")

    @property
    def is_end(self) -> bool:
        return self.name == "END" and self.value == END_DATA

    def get_value(self) -> Data:
        return self.value

    def repr_text(self) -> str:
        return f"{self.name} -> {self.value}"

    def children(self) -> List[ASTNode]:
        return []

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_leaf(self)


@dataclass(frozen=True)
class Binary(ASTNode):
    """
    Two-child node.

    The value tags the construct: FUNC for calls (right is the argument
    list), ITEM for an operator chain starting at an item, or the operator
    category for a chain starting at a literal.
    """
    value: Data
    left: ASTNode
    right: ASTNode

    kind = NodeKind.BINARY

    def get_value(self) -> Data:
        return self.value

    def repr_text(self) -> str:
        return f"{self.left} <- {self.value} -> {self.right}"

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary(self)


@dataclass(frozen=True)
class ListNode(ASTNode):
    """Ordered list of owned children, used for call arguments."""
    items: Tuple[ASTNode, ...] = ()
    name: str = "PARAMS_LIST"
    index: int = 0

    kind = NodeKind.LIST

    def get_value(self) -> Data:
        """Value of the child at the cursor index, or empty data."""
        if 0 <= self.index < len(self.items):
            return self.items[self.index].get_value()
        return EMPTY_DATA

    def repr_text(self) -> str:
        return f"{self.name}[{', '.join(str(item) for item in self.items)}]"

    def children(self) -> List[ASTNode]:
        return list(self.items)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_list(self)

    def __len__(self) -> int:
        return len(self.items)


# ============================================================================
# Visitors
# ============================================================================

class NodeRenderer(ASTVisitor):
    """Renders a tree as indented lines, one node per line."""

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self._depth = 0

    def render(self, node: ASTNode) -> str:
        self._depth = 0
        return "\n".join(self.visit(node))

    def _line(self, text: str) -> str:
        return f"{self.indent * self._depth}{text}"

    def _nested(self, nodes: List[ASTNode]) -> List[str]:
        self._depth += 1
        try:
            lines = []
            for child in nodes:
                lines.extend(self.visit(child))
            return lines
        finally:
            self._depth -= 1

    def visit_leaf(self, node: Leaf) -> List[str]:
        return [self._line(node.repr_text())]

    def visit_binary(self, node: Binary) -> List[str]:
        return [self._line(str(node.value))] + self._nested(node.children())

    def visit_list(self, node: ListNode) -> List[str]:
        return [self._line(f"{node.name} ({len(node)})")] + self._nested(node.children())


class NodeSerializer(ASTVisitor):
    """Converts a tree into plain nested dicts (JSON friendly)."""

    def visit_leaf(self, node: Leaf) -> Dict[str, Any]:
        return {
            "type": node.get_type(),
            "name": node.name,
            "data_type": node.value.data_type,
            "value": node.value.value,
        }

    def visit_binary(self, node: Binary) -> Dict[str, Any]:
        return {
            "type": node.get_type(),
            "data_type": node.value.data_type,
            "value": node.value.value,
            "left": self.visit(node.left),
            "right": self.visit(node.right),
        }

    def visit_list(self, node: ListNode) -> Dict[str, Any]:
        return {
            "type": node.get_type(),
            "name": node.name,
            "items": [self.visit(item) for item in node.items],
        }


def to_dict(node: ASTNode) -> Dict[str, Any]:
    """Plain-dict form of a tree."""
    return NodeSerializer().visit(node)

"""
Tests for the exprlang AST node model.

Author: xwest
"""

import dataclasses
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprlang.parser import parse_string
from exprlang.parser.ast_nodes import (
    ASTVisitor, Data, Leaf, Binary, ListNode, NodeKind, NodeRenderer, to_dict, EMPTY_DATA
)


class LeafCounter(ASTVisitor):
    def visit_leaf(self, node):
        return 1

    def visit_binary(self, node):
        return self.visit(node.left) + self.visit(node.right)

    def visit_list(self, node):
        return sum(self.visit(child) for child in node.items)


class TestNodes(unittest.TestCase):
    """Node capabilities: value, type discriminator, representation."""

    def setUp(self):
        self.one = Leaf(Data("NUMBER_LIT", "1"), "NUMBER_LIT")
        self.two = Leaf(Data("NUMBER_LIT", "2"), "NUMBER_LIT")
        self.name = Leaf(Data("ITEM", "x"), "ITEM")
        self.args = ListNode((self.one, self.two))
        self.call = Binary(Data("FUNC", "FUNC"), self.name, self.args)

    def test_type_discriminators(self):
        self.assertEqual(self.one.get_type(), "leaf")
        self.assertEqual(self.call.get_type(), "binary")
        self.assertEqual(self.args.get_type(), "list")
        self.assertIs(self.args.kind, NodeKind.LIST)

    def test_values(self):
        self.assertEqual(self.one.get_value(), Data("NUMBER_LIT", "1"))
        self.assertEqual(self.call.get_value(), Data("FUNC", "FUNC"))
        self.assertEqual(self.args.get_value(), Data("NUMBER_LIT", "1"))

    def test_list_value_out_of_range(self):
        self.assertEqual(ListNode().get_value(), EMPTY_DATA)
        self.assertEqual(ListNode((self.one,), index=3).get_value(), EMPTY_DATA)
        self.assertEqual(ListNode((self.one, self.two), index=1).get_value(), self.two.value)

    def test_representation(self):
        self.assertEqual(str(self.one), "[ NUMBER_LIT -> 1 ]")
        self.assertEqual(str(self.args), "[ PARAMS_LIST[[ NUMBER_LIT -> 1 ], [ NUMBER_LIT -> 2 ]] ]")
        self.assertEqual(
            self.call.repr_text(),
            "[ ITEM -> x ] <- FUNC -> [ PARAMS_LIST[[ NUMBER_LIT -> 1 ], [ NUMBER_LIT -> 2 ]] ]"
        )

    def test_end_leaf(self):
        end = Leaf.end()
        self.assertTrue(end.is_end)
        self.assertEqual(end.get_value(), Data("END", "END"))
        self.assertFalse(self.name.is_end)

    def test_nodes_are_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.one.name = "other"
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.call.left = self.two

    def test_structural_equality(self):
        rebuilt = Binary(Data("FUNC", "FUNC"), Leaf(Data("ITEM", "x"), "ITEM"),
                         ListNode((Leaf(Data("NUMBER_LIT", "1"), "NUMBER_LIT"), self.two)))
        self.assertEqual(rebuilt, self.call)
        self.assertEqual(hash(rebuilt), hash(self.call))
        self.assertNotEqual(self.one, self.two)

    def test_children(self):
        self.assertEqual(self.call.children(), [self.name, self.args])
        self.assertEqual(self.args.children(), [self.one, self.two])
        self.assertEqual(self.one.children(), [])
        self.assertEqual(len(self.args), 2)


class TestVisitors(unittest.TestCase):

    def test_custom_visitor(self):
        [tree] = parse_string("out(add(1, 2), 'hi')")
        self.assertEqual(LeafCounter().visit(tree), 5)

    def test_renderer(self):
        [tree] = parse_string("x(1, a + 2)")
        self.assertEqual(NodeRenderer().render(tree), "\n".join([
            "FUNC",
            "  ITEM -> x",
            "  PARAMS_LIST (2)",
            "    NUMBER_LIT -> 1",
            "    ITEM",
            "      ITEM -> a",
            "      NUMBER_LIT -> 2",
        ]))

    def test_to_dict(self):
        [tree] = parse_string("1 + 'a'")
        self.assertEqual(to_dict(tree), {
            "type": "binary",
            "data_type": "OPER_ADDTN",
            "value": "OPER_ADDTN",
            "left": {"type": "leaf", "name": "NUMBER_LIT", "data_type": "NUMBER_LIT", "value": "1"},
            "right": {"type": "leaf", "name": "STRING_LIT", "data_type": "STRING_LIT", "value": "a"},
        })

    def test_to_dict_list(self):
        [tree] = parse_string("f()")
        self.assertEqual(to_dict(tree)["right"], {"type": "list", "name": "PARAMS_LIST", "items": []})


if __name__ == "__main__":
    unittest.main()

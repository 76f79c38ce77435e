"""Parse-tree reading and syntactic feature extraction.

Trees are read from Penn-Treebank style bracketed strings, one tree per
line::

    (S (NP (DT the) (NN dog)) (VP (VBD barked)))

Words are discarded, so part-of-speech tags become the leaves. The feature
functions each turn a single tree into a list of term strings:

- ``subtree_features``: one-level productions, ``(S (NP)(VP))``
- ``depth_features``: the height of the tree
- ``branch_features``: branching factor of every internal node
- ``tag_features``: every node category
- ``skeleton_features``: unlabeled bracket shape of every subtree
- ``semi_skeleton_features``: node label followed by its children's shapes
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import TreeParseError

_TOKEN_RE = re.compile(r"\(|\)|[^\s()]+")


@dataclass
class ParseTree:
    """A node in a constituency parse tree."""

    category: str
    children: list["ParseTree"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if not self.children:
            return 1
        return 1 + max(child.height for child in self.children)

    def walk(self) -> Iterator["ParseTree"]:
        """Yield every node in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def skeleton(self) -> str:
        return "(" + "".join(child.skeleton() for child in self.children) + ")"

    def semi_skeleton(self) -> str:
        return (
            "(" + self.category
            + "".join(child.skeleton() for child in self.children) + ")"
        )

    def production(self) -> str:
        if not self.children:
            return f"({self.category})"
        kids = "".join(f"({child.category})" for child in self.children)
        return f"({self.category} {kids})"

    @classmethod
    def from_string(cls, text: str) -> "ParseTree":
        """Parse one bracketed tree.

        Raises:
            TreeParseError: If the brackets are unbalanced or the string
                contains anything besides a single tree.
        """
        tokens = _TOKEN_RE.findall(text)
        if not tokens:
            raise TreeParseError("Empty parse tree")
        tree, pos = _parse_node(tokens, 0, text)
        if pos != len(tokens):
            raise TreeParseError(f"Trailing content after parse tree: {text!r}")
        # Treebank files wrap each sentence in an unlabeled root: "( (S ...) )"
        while not tree.category and len(tree.children) == 1:
            tree = tree.children[0]
        return tree


def _parse_node(tokens: list[str], pos: int, source: str) -> tuple[ParseTree, int]:
    if tokens[pos] != "(":
        raise TreeParseError(f"Expected '(' at token {pos} in {source!r}")
    pos += 1
    if pos >= len(tokens):
        raise TreeParseError(f"Unbalanced brackets in {source!r}")

    category = ""
    if tokens[pos] not in ("(", ")"):
        category = tokens[pos]
        pos += 1

    node = ParseTree(category)
    while True:
        if pos >= len(tokens):
            raise TreeParseError(f"Unbalanced brackets in {source!r}")
        token = tokens[pos]
        if token == ")":
            return node, pos + 1
        if token == "(":
            child, pos = _parse_node(tokens, pos, source)
            node.children.append(child)
        else:
            pos += 1  # word under a preterminal


def parse_trees(text: str) -> list[ParseTree]:
    """Parse every non-blank line of ``text`` as a tree."""
    return [ParseTree.from_string(line) for line in text.splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# Feature extractors
# ---------------------------------------------------------------------------

def subtree_features(tree: ParseTree) -> list[str]:
    return [node.production() for node in tree.walk()]


def depth_features(tree: ParseTree) -> list[str]:
    return [str(tree.height)]


def branch_features(tree: ParseTree) -> list[str]:
    return [str(len(node.children)) for node in tree.walk() if node.children]


def tag_features(tree: ParseTree) -> list[str]:
    return [node.category for node in tree.walk()]


def skeleton_features(tree: ParseTree) -> list[str]:
    return [node.skeleton() for node in tree.walk()]


def semi_skeleton_features(tree: ParseTree) -> list[str]:
    return [node.semi_skeleton() for node in tree.walk()]

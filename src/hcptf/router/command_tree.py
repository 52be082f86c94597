"""Command registry stored as a token trie.

The tree is built once from the flat list of canonical command paths
(``"workspace list"``, ``"organization token delete"``) and is read-only
afterwards, so a single instance can be shared by any number of routers.

Usage::

    tree = CommandTree(["workspace list", "workspace read", "version"])
    tree.has_root("workspace")          # True
    tree.has_path(["workspace", "list"])  # True
    tree.verbs("workspace")             # frozenset({"list", "read"})
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


class _CommandNode:
    """A node in the command trie. Mutable during construction only."""

    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _CommandNode] = {}
        self.terminal = False


def tokenize(path: str) -> tuple[str, ...]:
    """Split a command path on whitespace."""
    return tuple(path.split())


class CommandTree:
    """Token trie of canonical command paths.

    A token is a known root iff some registered path begins with it.
    Paths that are prefixes of other paths (``"stack"`` and ``"stack list"``)
    coexist; intermediate nodes need not be terminal.
    """

    __slots__ = ("_root", "_roots", "_size")

    def __init__(self, command_paths: Iterable[str] = ()) -> None:
        self._root = _CommandNode()
        roots: set[str] = set()
        size = 0

        for path in command_paths:
            tokens = tokenize(path)
            if not tokens:
                continue

            roots.add(tokens[0])

            node = self._root
            for token in tokens:
                child = node.children.get(token)
                if child is None:
                    child = _CommandNode()
                    node.children[token] = child
                node = child
            if not node.terminal:
                node.terminal = True
                size += 1

        self._roots = frozenset(roots)
        self._size = size

    def has_root(self, token: str) -> bool:
        """Return True if ``token`` is the first token of a registered path."""
        return token in self._roots

    def has_path(self, tokens: Sequence[str] | str) -> bool:
        """Return True if the exact token sequence is a registered command."""
        node = self._find(tokens)
        return node is not None and node.terminal

    def children(self, tokens: Sequence[str] | str = ()) -> list[str]:
        """Return the sorted tokens directly below ``tokens``."""
        node = self._find(tokens)
        if node is None:
            return []
        return sorted(node.children)

    def verbs(self, namespace: Sequence[str] | str) -> frozenset[str]:
        """Return the tokens that complete ``namespace`` into a registered command."""
        node = self._find(namespace)
        if node is None:
            return frozenset()
        return frozenset(token for token, child in node.children.items() if child.terminal)

    @property
    def roots(self) -> list[str]:
        """Sorted list of top-level command roots."""
        return sorted(self._roots)

    def paths(self) -> Iterator[tuple[str, ...]]:
        """Iterate over all registered command paths in sorted order."""
        yield from self._walk(self._root, ())

    def _walk(self, node: _CommandNode, prefix: tuple[str, ...]) -> Iterator[tuple[str, ...]]:
        for token in sorted(node.children):
            child = node.children[token]
            path = prefix + (token,)
            if child.terminal:
                yield path
            yield from self._walk(child, path)

    def _find(self, tokens: Sequence[str] | str) -> _CommandNode | None:
        if isinstance(tokens, str):
            tokens = tokenize(tokens)
        node = self._root
        for token in tokens:
            node = node.children.get(token)
            if node is None:
                return None
        return node

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, tuple, list)):
            return False
        return self.has_path(path)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CommandTree(roots={len(self._roots)}, paths={self._size})"


def has_root(tree: CommandTree | None, token: str) -> bool:
    """Root membership that tolerates an absent registry (always False)."""
    if tree is None:
        return False
    return tree.has_root(token)

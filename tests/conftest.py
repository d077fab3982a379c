import pytest

from metric_bktree.core.bktree import BKTree
from metric_bktree.distance.levenshtein import LevenshteinDistance

WORDS = ["some", "soft", "same", "mole", "soda", "salmon"]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def tree(words):
    return BKTree(LevenshteinDistance()).build(words)


@pytest.fixture
def word_file(tmp_path, words):
    p = tmp_path / "words.txt"
    p.write_text("# sample dictionary\n" + "\n".join(words) + "\n\n", encoding="utf-8")
    return p


def _subtree_items(node):
    stack, out = [node], []
    while stack:
        n = stack.pop()
        out.append(n.item)
        stack.extend(n.children.values())
    return out


@pytest.fixture
def check_invariants():
    """Assert the BK property over whole subtrees, size, uniqueness and reachability."""

    def check(tree):
        items = _subtree_items(tree.root) if tree.root is not None else []
        assert len(items) == len(tree)
        stack = [tree.root] if tree.root is not None else []
        while stack:
            node = stack.pop()
            for key, child in node.children.items():
                for item in _subtree_items(child):
                    assert tree.dist(node.item, item) == key, (node.item, key, item)
                stack.append(child)
        for i, a in enumerate(items):
            for b in items[i + 1 :]:
                assert tree.dist(a, b) != 0
        for item in items:
            assert item in tree
        assert sorted(tree) == sorted(items)

    return check

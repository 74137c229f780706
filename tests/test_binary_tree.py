import pytest

from docindex.binary_tree import BinaryTree, KeyValue

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def _tree(keys=KEYS):
    tree = BinaryTree()
    for key in keys:
        tree.add(key, f"v{key}")
    return tree


def _keys(pairs):
    return [pair.key for pair in pairs]


def test_empty_tree():
    tree = BinaryTree()
    assert tree.is_empty() is True
    assert tree.min() is None
    assert tree.max() is None
    assert tree.pop_min() is None
    assert tree.pop_max() is None
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.postorder() == []
    assert tree.levelorder() == []
    assert tree.format() == "NULL"


def test_get_and_default():
    tree = _tree()
    assert tree.is_empty() is False
    for key in KEYS:
        assert tree.get(key) == f"v{key}"
    assert tree.get(999) is None
    assert tree.get(999, "missing") == "missing"


def test_add_replaces_existing_value():
    tree = _tree()
    tree.add(40, "new")
    assert tree.get(40) == "new"
    assert len(tree.inorder()) == len(KEYS)


def test_add_recursive_keeps_duplicates():
    tree = BinaryTree()
    for key in [5, 3, 5, 7]:
        tree.add_recursive(key, key * 10)
    assert _keys(tree.inorder()) == [3, 5, 5, 7]


def test_inorder_is_sorted():
    tree = _tree()
    assert _keys(tree.inorder()) == sorted(KEYS)
    assert tree.inorder() == tree.inorder_recursive()


def test_iterative_matches_recursive():
    tree = _tree()
    assert tree.preorder() == tree.preorder_recursive()
    assert tree.postorder() == tree.postorder_recursive()


def test_traversal_shapes():
    tree = _tree()
    assert tree.preorder()[0].key == KEYS[0]
    assert tree.postorder()[-1].key == KEYS[0]
    level = _keys(tree.levelorder())
    assert level[0] == KEYS[0]
    assert sorted(level) == sorted(KEYS)
    assert set(level[1:3]) == {30, 70}


def test_format_single_node():
    tree = BinaryTree()
    tree.add(5, None)
    assert tree.format() == "(5, NULL, NULL)"


def test_min_max():
    tree = _tree()
    assert tree.min() == KeyValue(20, "v20")
    assert tree.max() == KeyValue(80, "v80")


def test_pop_min_and_max_drain_in_order():
    tree = _tree()
    popped = []
    while not tree.is_empty():
        popped.append(tree.pop_min().key)
    assert popped == sorted(KEYS)

    tree = _tree()
    popped = []
    while not tree.is_empty():
        popped.append(tree.pop_max().key)
    assert popped == sorted(KEYS, reverse=True)


@pytest.mark.parametrize("key", KEYS)
def test_remove_each_key_keeps_order(key):
    tree = _tree()
    tree.remove(key)
    remaining = [k for k in KEYS if k != key]
    assert _keys(tree.inorder()) == sorted(remaining)
    assert tree.get(key) is None
    for other in remaining:
        assert tree.get(other) == f"v{other}"


def test_remove_missing_key_is_ignored():
    tree = _tree()
    tree.remove(12345)
    assert _keys(tree.inorder()) == sorted(KEYS)


def test_remove_root_with_two_children():
    tree = _tree()
    tree.remove(50)
    assert tree.preorder()[0].key == 60
    assert _keys(tree.inorder()) == sorted(k for k in KEYS if k != 50)


def test_string_keys():
    tree = _tree(["pear", "apple", "fig"])
    assert _keys(tree.inorder()) == ["apple", "fig", "pear"]
    assert tree.get("fig") == "vfig"


def test_keyvalue_is_immutable():
    pair = KeyValue(1, "a")
    with pytest.raises(AttributeError):
        pair.key = 2
    assert pair.key == 1
    assert pair.value == "a"
    assert pair == KeyValue(1, "a")
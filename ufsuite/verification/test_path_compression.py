import random

from ufsuite.core.unionfind import DisjointSet


def chain(n, path_compression):
    """n-1 -> n-2 -> ... -> 0, built by hand so the path is long."""
    uf = DisjointSet(n, path_compression)
    for i in range(1, n):
        uf.parent[i] = i - 1
    uf.height[0] = n
    uf.count = 1
    return uf


def depth(uf, p):
    d = 0
    while uf.parent[p] != p:
        p = uf.parent[p]
        d += 1
    return d


def test_find_halves_the_path():
    uf = chain(5, True)
    assert uf.find(4) == 0
    # every node below the root now points at its old grandparent
    assert uf.parent == [0, 0, 0, 1, 2]
    assert depth(uf, 4) == 2


def test_find_without_compression_leaves_parents_alone():
    uf = chain(5, False)
    assert uf.find(4) == 0
    assert uf.parent == [0, 0, 1, 2, 3]
    assert depth(uf, 4) == 4


def test_find_on_root_has_no_side_effect():
    uf = chain(4, True)
    before = list(uf.parent)
    assert uf.find(0) == 0
    assert uf.parent == before


def test_repeated_find_keeps_shortening_until_flat():
    uf = chain(9, True)
    depths = []
    for _ in range(4):
        assert uf.find(8) == 0
        depths.append(depth(uf, 8))
    assert depths == sorted(depths, reverse=True)
    assert depths[-1] <= 1


def test_compression_does_not_change_connectivity():
    rng = random.Random(11)
    pairs = [(rng.randrange(40), rng.randrange(40)) for _ in range(45)]

    on = DisjointSet(40, True)
    off = DisjointSet(40, False)
    for p, q in pairs:
        on.connect(p, q)
        off.connect(p, q)

    assert on.components() == off.components()
    for p in range(40):
        for q in range(40):
            assert on.connected(p, q) == off.connected(p, q)


def test_toggling_compression_is_not_retroactive():
    uf = chain(5, False)
    uf.set_path_compression(True)
    assert uf.path_compression is True
    assert uf.parent == [0, 0, 1, 2, 3]

    uf.find(4)
    assert uf.parent == [0, 0, 0, 1, 2]

    uf.set_path_compression(False)
    uf.find(4)
    assert uf.parent == [0, 0, 0, 1, 2]


def test_heights_bound_tree_depth_without_compression():
    rng = random.Random(3)
    uf = DisjointSet(256, False)
    while uf.components() > 1:
        uf.connect(rng.randrange(256), rng.randrange(256))
    root = uf.find(0)
    tallest = max(depth(uf, i) for i in range(256))
    assert tallest < uf.height[root]
    assert uf.height[root] <= 9  # log2(256) + 1

from graphsolve.graph.residual import ResidualGraph
from graphsolve.types.dto import Edge


def _residual(*triples):
    return ResidualGraph.from_edges(Edge(u, v, capacity=c) for u, v, c in triples)


def test_seeded_pairs_and_implicit_reverse():
    r = _residual(("A", "B", 4))
    assert r.capacity("A", "B") == 4
    assert r.capacity("B", "A") == 0
    assert ("A", "B") in r
    assert ("B", "A") not in r
    assert len(r) == 1


def test_last_duplicate_wins():
    r = _residual(("A", "B", 4), ("A", "B", 9))
    assert r.capacity("A", "B") == 9
    assert len(r) == 1


def test_self_loops_are_skipped():
    r = _residual(("A", "A", 4))
    assert len(r) == 0


def test_tuple_keys_do_not_collide_on_delimiters():
    # With "u-v" string keys these two pairs would share the key "A-B-C".
    r = _residual(("A-B", "C", 1), ("A", "B-C", 2))
    assert r.capacity("A-B", "C") == 1
    assert r.capacity("A", "B-C") == 2


def test_neighbors_follow_pair_creation_order():
    r = _residual(("A", "C", 1), ("A", "B", 1))
    r.add_capacity("A", "D", 1)
    assert list(r.neighbors("A")) == ["C", "B", "D"]
    assert list(r.neighbors("Z")) == []


def test_find_augmenting_path_depth_first():
    r = _residual(("S", "A", 1), ("S", "B", 1), ("A", "T", 1), ("B", "T", 1))
    assert r.find_augmenting_path("S", "T") == ["S", "A", "T"]


def test_find_augmenting_path_backtracks():
    r = _residual(("S", "A", 1), ("A", "X", 1), ("S", "B", 1), ("B", "T", 1))
    assert r.find_augmenting_path("S", "T") == ["S", "B", "T"]


def test_find_augmenting_path_ignores_saturated_pairs():
    r = _residual(("S", "A", 0), ("A", "T", 3))
    assert r.find_augmenting_path("S", "T") is None


def test_augment_moves_capacity_to_reverse_pairs():
    r = _residual(("S", "A", 5), ("A", "T", 3))
    path = r.find_augmenting_path("S", "T")
    amount = r.bottleneck(path)
    assert amount == 3
    r.augment(path, amount)
    assert r.capacity("S", "A") == 2
    assert r.capacity("A", "S") == 3
    assert r.capacity("A", "T") == 0
    assert r.capacity("T", "A") == 3
    assert r.find_augmenting_path("S", "T") is None
    assert r.reachable_from("S") == {"S", "A"}


def test_long_path_does_not_recurse():
    chain = [(f"n{i}", f"n{i + 1}", 1) for i in range(5000)]
    r = _residual(*chain)
    path = r.find_augmenting_path("n0", "n5000")
    assert len(path) == 5001

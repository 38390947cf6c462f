from orderedmap.utils.collections import OrderedKeySet


def test_ordered_key_set():
    ks = OrderedKeySet()
    ks.add(1)
    ks.add(2)
    ks.add(3)
    assert list(ks) == [1, 2, 3]
    ks.discard(1)
    assert list(ks) == [2, 3]


def test_it_should_keep_order_on_reinsert():
    ks = OrderedKeySet()
    ks.add(1)
    ks.add(2)
    ks.add(3)
    ks.add(2)
    assert list(ks) == [1, 2, 3]


def test_discard_absent_key_is_noop():
    ks = OrderedKeySet()
    ks.add(1)
    ks.discard(42)
    assert list(ks) == [1]


def test_to_list_is_a_copy():
    ks = OrderedKeySet()
    ks.add("a")
    ks.add("b")
    snapshot = ks.to_list()
    ks.add("c")
    ks.discard("a")
    assert snapshot == ["a", "b"]
    assert ks.to_list() == ["b", "c"]

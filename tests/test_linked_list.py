from inventory.linked_list import LinkedList


def test_empty_list():
    ll = LinkedList()
    assert ll.head is None
    assert ll.find(lambda v: True) is None
    assert ll.remove(lambda v: True) is None
    assert ll.to_list() == []
    seen = []
    ll.for_each(seen.append)
    assert seen == []


def test_append_keeps_order():
    ll = LinkedList()
    first = ll.append("a")
    assert ll.head is first
    ll.append("b")
    last = ll.append("c")
    assert last.next is None
    assert ll.to_list() == ["a", "b", "c"]
    assert list(ll) == ["a", "b", "c"]


def test_find_returns_first_match():
    ll = LinkedList()
    for v in [1, 2, 3, 4]:
        ll.append(v)
    node = ll.find(lambda v: v % 2 == 0)
    assert node.value == 2
    assert ll.find(lambda v: v > 10) is None
    # find does not mutate
    assert ll.to_list() == [1, 2, 3, 4]


def test_remove_head_middle_and_tail():
    ll = LinkedList()
    for v in "abcd":
        ll.append(v)
    assert ll.remove(lambda v: v == "a") == "a"
    assert ll.head.value == "b"
    assert ll.remove(lambda v: v == "c") == "c"
    assert ll.remove(lambda v: v == "d") == "d"
    assert ll.to_list() == ["b"]
    assert ll.remove(lambda v: v == "zz") is None
    assert ll.remove(lambda v: v == "b") == "b"
    assert ll.head is None


def test_remove_stops_at_first_match():
    ll = LinkedList()
    for v in [5, 7, 5]:
        ll.append(v)
    assert ll.remove(lambda v: v == 5) == 5
    assert ll.to_list() == [7, 5]


def test_for_each_visits_in_order():
    ll = LinkedList()
    for v in range(5):
        ll.append(v)
    seen = []
    assert ll.for_each(seen.append) is None
    assert seen == [0, 1, 2, 3, 4]


def test_to_list_is_a_new_list():
    ll = LinkedList()
    ll.append(1)
    out = ll.to_list()
    out.append(2)
    assert ll.to_list() == [1]

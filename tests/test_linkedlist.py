import pytest

from sigtalk.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_construct_from_items_keeps_order():
    lst = LinkedList(["Node 1", "Node 2", "Node 3"])
    assert list(lst) == ["Node 1", "Node 2", "Node 3"]
    assert len(lst) == 3


def test_push_back_appends():
    lst = LinkedList()
    for item in ["Node 1", "Node 2", "Node 3"]:
        lst.push_back(item)
    assert list(lst) == ["Node 1", "Node 2", "Node 3"]
    assert lst.last().content == "Node 3"


def test_push_front_prepends():
    lst = LinkedList(["First", "Second", "Third"])
    node = lst.push_front("FirstOfAll")
    assert lst.head is node
    assert lst.head.content == "FirstOfAll"
    assert list(lst) == ["FirstOfAll", "First", "Second", "Third"]
    assert lst.last().content == "Third"


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last().content == "only"
    assert len(lst) == 1


def test_last_node_has_no_successor():
    lst = LinkedList(["First", "Second", "Third"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.next is None
    assert last.content == "Third"


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    lst.push_back(5)
    assert len(lst) == 7
    assert len(lst) == len(list(lst))


def test_iterate_visits_in_order():
    seen = []
    LinkedList(["Primeiro", "Segundo", "Terceiro"]).iterate(seen.append)
    assert seen == ["Primeiro", "Segundo", "Terceiro"]


def test_iterate_empty_never_calls():
    seen = []
    LinkedList().iterate(seen.append)
    assert seen == []


def test_map_builds_new_list():
    original = LinkedList(["abc", "def", "ghi"])
    mapped = original.map(str.upper, lambda content: None)
    assert list(mapped) == ["ABC", "DEF", "GHI"]
    assert list(original) == ["abc", "def", "ghi"]
    assert mapped is not original
    assert len(mapped) == len(original)


def test_map_empty_gives_empty():
    mapped = LinkedList().map(str.upper)
    assert list(mapped) == []


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(content):
        if content == "ghi":
            raise RuntimeError("boom")
        return content.upper()

    with pytest.raises(RuntimeError):
        LinkedList(["abc", "def", "ghi"]).map(f, deleted.append)
    assert deleted == ["ABC", "DEF"]


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList(["Node 1", "Node 2"])
    lst.clear(deleted.append)
    assert deleted == ["Node 1", "Node 2"]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_then_reuse():
    lst = LinkedList(["a", "b"])
    lst.clear()
    lst.push_back("c")
    assert list(lst) == ["c"]
    assert lst.last().content == "c"
    assert len(lst) == 1
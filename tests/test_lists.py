import pytest

from pushswap.lists import LinkedList


def test_construction_keeps_order_and_length():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list_has_no_length():
    assert len(LinkedList()) == 0
    assert list(LinkedList()) == []


def test_add_front_prepends():
    lst = LinkedList(["b"])
    lst.add_front("a")
    assert list(lst) == ["a", "b"]


def test_add_back_appends():
    lst = LinkedList(["a"])
    lst.add_back("b")
    assert list(lst) == ["a", "b"]
    assert lst.last() == "b"


def test_add_back_on_empty_list():
    lst = LinkedList()
    lst.add_back(7)
    assert list(lst) == [7]


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_remove_first_hands_content_to_delete():
    deleted = []
    lst = LinkedList([1, 2, 3])
    removed = lst.remove_first(deleted.append)
    assert removed == 1
    assert deleted == [1]
    assert list(lst) == [2, 3]


def test_remove_first_without_deleter():
    lst = LinkedList(["x", "y"])
    assert lst.remove_first() == "x"
    assert len(lst) == 1


def test_remove_first_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = [3, 1, 2]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0


def test_apply_visits_front_to_back():
    seen = []
    items = ["p", "q", "r"]
    lst = LinkedList(items)
    lst.apply(seen.append)
    assert seen == items
    assert list(lst) == items


def test_map_builds_new_list_and_keeps_original():
    items = [1, 2, 3]
    lst = LinkedList(items)
    mapped = lst.map(str, lambda content: None)
    assert list(mapped) == ["1", "2", "3"]
    assert list(lst) == items


def test_map_of_empty_list_is_empty():
    mapped = LinkedList().map(str, lambda content: None)
    assert len(mapped) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(content):
        if content == "boom":
            raise RuntimeError("failed")
        return content.upper()

    lst = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == ["A", "B"]


def test_map_requires_function_and_deleter():
    lst = LinkedList([1])
    with pytest.raises(TypeError):
        lst.map(None, lambda content: None)
    with pytest.raises(TypeError):
        lst.map(str, None)
from pipex.linked import ListNode, lstnew


def test_lstnew_holds_content_and_has_no_next():
    node = lstnew(42)
    assert node.content == 42
    assert node.next is None
    assert list(node) == [42]


def test_lstnew_keeps_same_object():
    payload = {"key": "value"}
    node = lstnew(payload)
    assert node.content is payload


def test_iteration_follows_links():
    head = lstnew("a")
    head.next = lstnew("b")
    head.next.next = ListNode("c")
    assert list(head) == ["a", "b", "c"]
from drills.lunch_queue import Queue


def _filled():
    queue = Queue()
    queue.add("Marie", 20)
    queue.add("Monica", 15)
    queue.add("Ana", 5)
    queue.add("Alice", 35)
    return queue


def test_new():
    assert Queue().node is None


def test_one_person():
    queue = Queue()
    queue.add("Marie", 14)
    assert queue.rm() == ("Marie", 14)
    assert queue.node is None


def test_two_person():
    queue = Queue()
    queue.add("Marie", 13)
    queue.add("Monica", 54)
    queue.rm()
    assert queue.node.name == "Monica"
    assert queue.node.discount == 54


def test_more_person():
    queue = _filled()
    queue.rm()
    assert queue.node.name == "Alice"
    assert queue.node.discount == 35
    queue.rm()
    queue.rm()
    assert queue.node.name == "Alice"
    assert queue.node.discount == 35


def test_search():
    queue = _filled()
    assert queue.search("Ana") == ("Ana", 5)
    assert queue.search("Monica") == ("Monica", 15)
    assert queue.search("Alice") == ("Alice", 35)
    assert queue.search("someone_that_does_not_exist") is None


def test_invert():
    queue = _filled()
    queue.invert_queue()
    assert queue.node.name == "Marie"
    assert queue.node.discount == 20
    queue.rm()
    queue.invert_queue()
    assert queue.node.name == "Ana"
    assert queue.node.discount == 5


def test_rm_order_and_empty():
    queue = _filled()
    assert queue.rm() == ("Marie", 20)
    assert queue.rm() == ("Monica", 15)
    assert [(p.name, p.discount) for p in queue] == [("Alice", 35), ("Ana", 5)]
    queue.rm()
    queue.rm()
    assert queue.rm() is None
import threading
import time

from vecindex.blocking_queue import BlockingQueue


def test_fifo_order():
    q = BlockingQueue()
    for i in range(5):
        q.put(i)
    assert [q.take() for _ in range(5)] == [0, 1, 2, 3, 4]
    assert q.empty()


def test_front_and_back_do_not_remove():
    q = BlockingQueue()
    q.put("a")
    q.put("b")
    q.put("c")
    assert q.front() == "a"
    assert q.back() == "c"
    assert len(q) == 3


def test_len_and_empty():
    q = BlockingQueue()
    assert q.empty() is True
    assert len(q) == 0
    q.put(1)
    assert q.empty() is False
    assert len(q) == 1


def test_take_waits_for_put():
    q = BlockingQueue()
    result = []
    consumer = threading.Thread(target=lambda: result.append(q.take()))
    consumer.start()
    time.sleep(0.05)
    assert result == []
    q.put("item")
    consumer.join(timeout=5)
    assert not consumer.is_alive()
    assert result == ["item"]


def test_put_waits_when_full():
    q = BlockingQueue()
    q.set_capacity(1)
    q.put(1)
    producer = threading.Thread(target=q.put, args=(2,))
    producer.start()
    time.sleep(0.05)
    assert producer.is_alive()
    assert len(q) == 1
    assert q.take() == 1
    producer.join(timeout=5)
    assert not producer.is_alive()
    assert q.take() == 2


def test_non_positive_capacity_is_ignored():
    q = BlockingQueue()
    q.set_capacity(2)
    q.set_capacity(0)
    q.set_capacity(-3)
    q.put(1)
    q.put(2)
    producer = threading.Thread(target=q.put, args=(3,))
    producer.start()
    time.sleep(0.05)
    assert producer.is_alive()
    assert q.take() == 1
    producer.join(timeout=5)
    assert not producer.is_alive()
    assert len(q) == 2


def test_many_producers_and_consumers():
    q = BlockingQueue()
    q.set_capacity(4)
    taken = []
    lock = threading.Lock()

    def consume():
        for _ in range(50):
            item = q.take()
            with lock:
                taken.append(item)

    def produce(base):
        for i in range(50):
            q.put(base + i)

    threads = [threading.Thread(target=consume) for _ in range(2)]
    threads += [threading.Thread(target=produce, args=(n * 1000,)) for n in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert sorted(taken) == list(range(50)) + list(range(1000, 1050))
    assert q.empty() is True
    assert len(q) == 0
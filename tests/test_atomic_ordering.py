import threading
from concurrent.futures import ThreadPoolExecutor

from oscamp.atomic_ordering import FlagChannel, OnceCell


def test_flag_channel():
    ch = FlagChannel()
    with ThreadPoolExecutor(max_workers=2) as executor:
        consumed = executor.submit(ch.consume)
        produced = executor.submit(ch.produce, 42)
        produced.result(timeout=5)
        value = consumed.result(timeout=5)
    assert value == 42


def test_flag_channel_large_value():
    ch = FlagChannel()
    producer = threading.Thread(target=lambda: ch.produce(0xDEAD_BEEF))
    producer.start()
    val = ch.consume()
    producer.join()
    assert val == 0xDEAD_BEEF


def test_flag_channel_reset():
    ch = FlagChannel()
    ch.produce(7)
    assert ch.consume() == 7
    ch.reset()
    ch.produce(9)
    assert ch.consume() == 9


def test_once_cell_init_once():
    cell = OnceCell()
    assert cell.init(42) is True
    assert cell.init(100) is False
    assert cell.get() == 42


def test_once_cell_not_initialized():
    cell = OnceCell()
    assert cell.get() is None


def test_once_cell_concurrent():
    cell = OnceCell()
    results = []
    lock = threading.Lock()

    def worker(i):
        ok = cell.init(i)
        with lock:
            results.append((i, ok))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    winners = [i for i, ok in results if ok]
    assert len(winners) == 1
    assert cell.get() == winners[0]
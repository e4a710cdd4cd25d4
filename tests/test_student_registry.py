from __future__ import annotations

import random
import threading

from rollbook.core import StudentRecord, StudentRegistry


def test_register_then_lookup_returns_equal_record() -> None:
    reg = StudentRegistry()
    rec = StudentRecord(roll_no=7, fields={"name": "Asha", "class": "X-B", "marks": [91, 88]})

    reg.register(rec)

    got = reg.lookup(7)
    assert got is not None
    assert got == rec
    assert got.to_dict() == {"rollNo": 7, "name": "Asha", "class": "X-B", "marks": [91, 88]}


def test_duplicate_roll_no_overwrites_without_merging() -> None:
    reg = StudentRegistry()
    reg.register(StudentRecord(roll_no=7, fields={"name": "Asha", "marks": 90}))
    reg.register(StudentRecord(roll_no=7, fields={"name": "Bala"}))

    got = reg.lookup(7)
    assert got is not None
    assert got.to_dict() == {"rollNo": 7, "name": "Bala"}
    assert len(reg) == 1


def test_lookup_of_unknown_roll_no_is_absent() -> None:
    reg = StudentRegistry()
    assert reg.lookup(99) is None

    reg.register(StudentRecord(roll_no=7, fields={"name": "Asha"}))
    assert reg.lookup(99) is None
    assert reg.lookup(0) is None
    assert 99 not in reg
    assert 7 in reg


def test_distinct_keys_do_not_leak() -> None:
    reg = StudentRegistry()
    records = {n: StudentRecord(roll_no=n, fields={"name": f"student-{n}"}) for n in range(-5, 50)}
    for rec in records.values():
        reg.register(rec)

    order = list(records)
    random.Random(0).shuffle(order)
    for n in order:
        assert reg.lookup(n) == records[n]
    assert len(reg) == len(records)


def test_concurrent_registration_of_distinct_keys_loses_nothing() -> None:
    reg = StudentRegistry()
    n_threads = 8
    per_thread = 250
    barrier = threading.Barrier(n_threads)

    def worker(t: int) -> None:
        barrier.wait()
        for i in range(per_thread):
            roll_no = t * per_thread + i
            reg.register(StudentRecord(roll_no=roll_no, fields={"thread": t, "i": i}))

    threads = [threading.Thread(target=worker, args=(t,)) for t in range(n_threads)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert len(reg) == n_threads * per_thread
    for t in range(n_threads):
        for i in range(per_thread):
            got = reg.lookup(t * per_thread + i)
            assert got is not None
            assert dict(got.fields) == {"thread": t, "i": i}


def test_concurrent_lookups_only_see_whole_records() -> None:
    reg = StudentRegistry()
    reg.register(StudentRecord(roll_no=1, fields={"name": "v0", "copy": "v0"}))
    stop = threading.Event()
    torn: list[dict] = []

    def writer() -> None:
        for i in range(2000):
            reg.register(StudentRecord(roll_no=1, fields={"name": f"v{i}", "copy": f"v{i}"}))
        stop.set()

    def reader() -> None:
        while not stop.is_set():
            got = reg.lookup(1)
            assert got is not None
            if got.fields["name"] != got.fields["copy"]:
                torn.append(got.to_dict())

    readers = [threading.Thread(target=reader) for _ in range(4)]
    w = threading.Thread(target=writer)
    for th in readers:
        th.start()
    w.start()
    w.join()
    for th in readers:
        th.join()

    assert torn == []
    final = reg.lookup(1)
    assert final is not None
    assert final.name == "v1999"


def test_caller_cannot_mutate_stored_record_through_nested_values() -> None:
    reg = StudentRegistry()
    marks = [91]
    reg.register(StudentRecord(roll_no=7, fields={"marks": marks}))

    marks.append(0)
    got = reg.lookup(7)
    assert got is not None
    assert got.fields["marks"] == [91]

    got.to_dict()["marks"].append(1)
    again = reg.lookup(7)
    assert again is not None
    assert again.to_dict() == {"rollNo": 7, "marks": [91]}

import threading

import pytest

from objdemos.lightref import LightRefBase, StrongPointer


class Tracked(LightRefBase):
    def __init__(self, log):
        super().__init__()
        self.log = log
        self.value = "payload"

    def on_destroy(self):
        self.log.append("destroyed")


class A(LightRefBase):
    def __init__(self, log):
        super().__init__()
        self.log = log

    def on_destroy(self):
        self.log.append("destructor A")


class B(A):
    def on_destroy(self):
        self.log.append("destructor B")
        super().on_destroy()


def test_new_object_has_no_references():
    assert LightRefBase().strong_count() == 0


def test_pointer_takes_a_reference():
    obj = Tracked([])
    pointer = StrongPointer(obj)
    assert obj.strong_count() == 1
    assert pointer.get() is obj


def test_copy_adds_reference_and_clear_removes_it():
    log = []
    obj = Tracked(log)
    pointer = StrongPointer(obj)
    duplicate = pointer.copy()
    assert obj.strong_count() == 2
    duplicate.clear()
    assert obj.strong_count() == 1
    assert log == []
    assert duplicate.get() is None


def test_last_release_destroys_once():
    log = []
    pointer = StrongPointer(Tracked(log))
    pointer.clear()
    pointer.clear()
    assert log == ["destroyed"]


def test_self_assignment_keeps_object_alive():
    log = []
    obj = Tracked(log)
    pointer = StrongPointer(obj)
    pointer.assign(pointer)
    assert obj.strong_count() == 1
    assert log == []


def test_assign_switches_objects():
    old_log, new_log = [], []
    old, new = Tracked(old_log), Tracked(new_log)
    pointer = StrongPointer(old)
    pointer.assign(new)
    assert old_log == ["destroyed"]
    assert new.strong_count() == 1
    assert pointer.get() is new


def test_assign_from_pointer_shares_object():
    obj = Tracked([])
    first = StrongPointer(obj)
    second = StrongPointer()
    second.assign(first)
    assert obj.strong_count() == 2
    assert first == second


def test_assign_none_releases():
    log = []
    pointer = StrongPointer(Tracked(log))
    pointer.assign(None)
    assert log == ["destroyed"]
    assert not pointer


def test_dec_strong_without_reference_raises():
    with pytest.raises(ValueError):
        LightRefBase().dec_strong(None)


def test_attribute_forwarding():
    pointer = StrongPointer(Tracked([]))
    assert pointer.value == "payload"
    assert pointer.strong_count() == 1


def test_empty_pointer_has_no_attributes():
    with pytest.raises(AttributeError):
        StrongPointer().value


def test_equality_with_raw_object():
    obj = Tracked([])
    pointer = StrongPointer(obj)
    assert pointer == obj
    assert pointer != StrongPointer(Tracked([]))


def test_context_manager_releases():
    log = []
    with StrongPointer(Tracked(log)) as pointer:
        assert pointer.strong_count() == 1
    assert log == ["destroyed"]


def test_destruction_order_follows_class_chain():
    log = []
    a = StrongPointer(A(log))
    pa = StrongPointer(B(log))
    pb = StrongPointer(B(log))
    pa.clear()
    pb.clear()
    a.clear()
    assert log == [
        "destructor B",
        "destructor A",
        "destructor B",
        "destructor A",
        "destructor A",
    ]


def test_concurrent_counting_is_consistent():
    obj = Tracked([])
    holder = StrongPointer(obj)

    def churn():
        for _ in range(500):
            obj.inc_strong(None)
            obj.dec_strong(None)

    threads = [threading.Thread(target=churn) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert obj.strong_count() == 1
    assert holder.get() is obj
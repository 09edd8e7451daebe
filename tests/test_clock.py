import pytest

from antworld.clock import Clock, TimedElement


class _Recorder(TimedElement):
    def __init__(self, name, log):
        self.name = name
        self.log = log
        self.ticks = 0

    def update(self):
        self.ticks += 1
        self.log.append(self.name)


def test_tick_updates_in_subscription_order():
    log = []
    clock = Clock()
    clock.subscribe(_Recorder("a", log))
    clock.subscribe(_Recorder("b", log))
    clock.tick()
    assert log == ["a", "b"]


def test_each_tick_updates_every_element_once():
    clock = Clock()
    for i in range(3):
        clock.subscribe(_Recorder(str(i), []))
    for _ in range(5):
        clock.tick()
    assert [e.ticks for e in clock.elements] == [5, 5, 5]


def test_elements_lists_subscriptions():
    clock = Clock()
    element = _Recorder("x", [])
    clock.subscribe(element)
    assert clock.elements == [element]


def test_instance_is_shared():
    element = _Recorder("shared", [])
    Clock.instance().subscribe(element)
    assert Clock.instance().elements[-1] is element


def test_fresh_clock_is_not_the_shared_one():
    assert Clock() is not Clock.instance()
    assert Clock().elements == []


def test_timed_element_is_abstract():
    with pytest.raises(TypeError):
        TimedElement()
from __future__ import annotations

from devassets.diagnostics import poll


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_poll_returns_first_non_empty_result() -> None:
    clock = _FakeClock()
    results = iter([[], [], ["CS8019"]])

    value = poll(lambda: next(results), 10, 1, sleep=clock.sleep, clock=clock)

    assert value == ["CS8019"]
    assert clock.sleeps == [1, 1]


def test_poll_returns_last_value_on_timeout() -> None:
    clock = _FakeClock()
    calls: list[int] = []

    def fetch() -> list[str]:
        calls.append(1)
        return []

    value = poll(fetch, 3, 1, sleep=clock.sleep, clock=clock)

    assert value == []
    assert len(calls) == 4
    assert clock.now == 3


def test_poll_with_custom_predicate() -> None:
    clock = _FakeClock()
    counter = iter(range(10))

    value = poll(lambda: next(counter), 10, 0.5, lambda n: n >= 3, sleep=clock.sleep, clock=clock)

    assert value == 3


def test_poll_without_waiting_when_already_satisfied() -> None:
    clock = _FakeClock()

    assert poll(lambda: ["x"], 5, 1, sleep=clock.sleep, clock=clock) == ["x"]
    assert clock.sleeps == []

import logging

from toolkicker.core.application.stores import CartStore, Observable
from toolkicker.core.domain.cart import CartLine


class Counter(Observable[int]):
    def bump(self) -> None:
        if self._replace_state(self.state + 1):
            self._publish()


def test_subscribers_receive_new_snapshot():
    counter = Counter(0)
    seen: list[int] = []
    counter.subscribe(seen.append)

    counter.bump()
    counter.bump()

    assert seen == [1, 2]


def test_unsubscribe_stops_notifications():
    counter = Counter(0)
    seen: list[int] = []
    unsubscribe = counter.subscribe(seen.append)

    counter.bump()
    unsubscribe()
    unsubscribe()
    counter.bump()

    assert seen == [1]


def test_failing_subscriber_does_not_starve_others(caplog):
    counter = Counter(0)
    seen: list[int] = []

    def broken(_: int) -> None:
        raise RuntimeError("boom")

    counter.subscribe(broken)
    counter.subscribe(seen.append)

    with caplog.at_level(logging.ERROR):
        counter.bump()

    assert seen == [1]
    assert "failed" in caplog.text


def test_noop_mutation_does_not_notify(cart: CartStore):
    cart.add("drill")
    seen: list[tuple[CartLine, ...]] = []
    cart.subscribe(seen.append)

    cart.remove("missing")
    cart.update_days("missing", 3)

    assert seen == []


def test_state_is_visible_to_subscribers_immediately(cart: CartStore):
    observed: list[tuple[CartLine, ...]] = []
    cart.subscribe(lambda _: observed.append(cart.lines))

    cart.add("drill", 2)

    assert observed == [(CartLine("drill", 2),)]

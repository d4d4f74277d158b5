import threading

from bannerpic.latest import LatestOnly


def test_superseded_result_is_discarded():
    latest = LatestOnly()
    first = latest.begin()
    second = latest.begin()
    assert not latest.is_current(first)
    assert latest.publish(second, "new")
    assert not latest.publish(first, "old")
    assert latest.result == "new"
    assert latest.published == second


def test_nothing_published():
    latest = LatestOnly()
    assert latest.result is None
    assert latest.published == 0


def test_run_publishes_value():
    latest = LatestOnly()
    assert latest.run(str.upper, "abc") == (True, "ABC")
    assert latest.result == "ABC"


def test_slow_request_loses_to_newer_one():
    latest = LatestOnly()
    started = threading.Event()
    release = threading.Event()
    outcome = {}

    def slow():
        started.set()
        release.wait(5)
        return "slow"

    worker = threading.Thread(target=lambda: outcome.update(slow=latest.run(slow)))
    worker.start()
    started.wait(5)
    assert latest.run(lambda: "fast") == (True, "fast")
    release.set()
    worker.join(5)

    assert outcome["slow"] == (False, "slow")
    assert latest.result == "fast"

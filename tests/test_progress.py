import io
import threading

import pytest

from dockgrid.progress import ParallelProgress


def _bar_line(text):
    return text.splitlines()[-1]


def test_increment_before_start_ignored():
    out = io.StringIO()
    p = ParallelProgress(out)
    p.increment()
    assert p.count == 0
    assert out.getvalue() == ""


def test_start_prints_scale_and_ruler():
    out = io.StringIO()
    ParallelProgress(out).start(10)
    lines = out.getvalue().splitlines()
    assert lines[1].startswith("0%")
    assert lines[1].endswith("100%")
    assert lines[2] == "|----|----|----|----|----|----|----|----|----|----|"


@pytest.mark.parametrize("total", [1, 7, 50, 123])
def test_full_bar_has_51_stars(total):
    out = io.StringIO()
    p = ParallelProgress(out)
    p.start(total)
    for _ in range(total):
        p.increment()
    assert p.count == total
    assert _bar_line(out.getvalue()) == "*" * 51
    assert out.getvalue().endswith("\n")


def test_partial_bar_is_shorter_than_ruler():
    out = io.StringIO()
    p = ParallelProgress(out)
    p.start(100)
    for _ in range(40):
        p.increment()
    stars = out.getvalue().splitlines()[-1]
    assert set(stars) == {"*"}
    assert len(stars) < 51


def test_concurrent_increments():
    out = io.StringIO()
    p = ParallelProgress(out)
    total = 400
    p.start(total)

    def work():
        for _ in range(100):
            p.increment()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert p.count == total
    assert _bar_line(out.getvalue()) == "*" * 51
from mcukit.stopwatch import Resolution, State, StopWatch

MS = 1_000_000


class FakeClock:
    def __init__(self, ns=5 * 10**9):
        self.ns = ns

    def __call__(self):
        return self.ns

    def advance(self, ns):
        self.ns += ns


def test_initial_state():
    sw = StopWatch(clock=FakeClock())
    assert sw.state() is State.RESET
    assert sw.resolution() is Resolution.MILLIS
    assert not sw.is_running()
    assert sw.value() == 0


def test_running_value_in_millis():
    clock = FakeClock()
    sw = StopWatch(clock=clock)
    sw.start()
    assert sw.is_running()
    clock.advance(250 * MS)
    assert sw.value() == 250
    assert sw.elapsed() == 250


def test_stop_freezes_value():
    clock = FakeClock()
    sw = StopWatch(clock=clock)
    sw.start()
    clock.advance(40 * MS)
    sw.stop()
    clock.advance(900 * MS)
    assert sw.state() is State.STOPPED
    assert sw.value() == 40


def test_resume_accumulates():
    clock = FakeClock()
    sw = StopWatch(clock=clock)
    sw.start()
    clock.advance(100 * MS)
    sw.stop()
    clock.advance(1000 * MS)
    sw.start()
    clock.advance(50 * MS)
    assert sw.value() == 100 + 50


def test_start_while_running_is_noop():
    clock = FakeClock()
    sw = StopWatch(clock=clock)
    sw.start()
    clock.advance(30 * MS)
    sw.start()
    clock.advance(20 * MS)
    assert sw.value() == 30 + 20


def test_stop_when_reset_is_noop():
    sw = StopWatch(clock=FakeClock())
    sw.stop()
    assert sw.state() is State.RESET


def test_micros_resolution():
    clock = FakeClock()
    sw = StopWatch(Resolution.MICROS, clock)
    sw.start()
    clock.advance(7 * 1000)
    assert sw.value() == 7


def test_seconds_resolution():
    clock = FakeClock()
    sw = StopWatch(Resolution.SECONDS, clock)
    sw.start()
    clock.advance(3 * 10**9)
    assert sw.value() == 3


def test_reset():
    clock = FakeClock()
    sw = StopWatch(clock=clock)
    sw.start()
    clock.advance(10 * MS)
    sw.reset()
    assert sw.state() is State.RESET
    assert sw.value() == 0


def test_default_clock_runs_forward():
    sw = StopWatch()
    sw.start()
    sw.stop()
    assert sw.value() >= 0
    assert sw.state() is State.STOPPED
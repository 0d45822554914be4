import io
import re
import threading

from conlog import log
from conlog.adapters import ConsoleSink

THREADS = 8
CALLS = 200
LINE = re.compile(r"^\x1b\[37m\S+ \S+ \[msg\] worker-\d+ call-\d+\x1b\[0;00m$")


def test_concurrent_callers_produce_whole_lines(config):
    out = io.StringIO()
    logger = log.ConsoleLogger(config=config, sink=ConsoleSink(out))

    def run(n):
        for i in range(CALLS):
            logger.println(f"worker-{n}", f"call-{i}")

    threads = [threading.Thread(target=run, args=(n,)) for n in range(THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = out.getvalue().splitlines()
    assert len(lines) == THREADS * CALLS
    assert all(LINE.match(line) for line in lines)


def test_registry_changes_during_dispatch(config):
    out = io.StringIO()
    logger = log.ConsoleLogger(config=config, sink=ConsoleSink(out))
    received = []
    lock = threading.Lock()

    def collect(msg_type, out_type, cfg, *args):
        with lock:
            received.append(args)

    stop = threading.Event()

    def churn():
        i = 0
        while not stop.is_set():
            name = f"a{i % 5}"
            logger.add_adapter(name, collect, {"i": i})
            logger.set_adapter_config(name, {"i": -i})
            logger.remove_adapter(name)
            logger.configure(max_line_size=i % 3, debug_mode=bool(i % 2))
            i += 1

    def emit():
        for i in range(CALLS):
            logger.warningf("tick %d", i)

    churner = threading.Thread(target=churn)
    emitters = [threading.Thread(target=emit) for _ in range(4)]
    churner.start()
    for t in emitters:
        t.start()
    for t in emitters:
        t.join()
    stop.set()
    churner.join()

    assert out.getvalue().count("\x1b[0;00m") == 4 * CALLS
    assert all(args[0] == "tick %d" for args in received)

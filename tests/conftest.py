import datetime
import io
import logging
import pathlib

import pytest

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport to the item so fixtures can see the outcome in teardown
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def isolated_segsweep_logging(request):
    """Give each test a clean 'segsweep' logger and keep its records in memory.

    The CLI reconfigures the package logger (level, handler, propagation);
    restore it afterwards. Records are written to ``tests/test-logs`` only
    when the test fails.
    """
    pkg = logging.getLogger('segsweep')
    prev_handlers = list(pkg.handlers)
    prev_level = pkg.level
    prev_propagate = pkg.propagate

    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    pkg.addHandler(handler)

    try:
        yield
    finally:
        for h in list(pkg.handlers):
            pkg.removeHandler(h)
        for h in prev_handlers:
            pkg.addHandler(h)
        pkg.setLevel(prev_level)
        pkg.propagate = prev_propagate

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and rep.outcome == "failed" and buf.getvalue():
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n\n".format(request.node.nodeid))
                f.write(buf.getvalue())

import logging
import pathlib
import sys

SYS_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = SYS_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from class_roster.logger import BASE_LOGGER_NAME, LayeredFormatter, step, success


class _Collector(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _collect():
    handler = _Collector()
    logging.getLogger(BASE_LOGGER_NAME).addHandler(handler)
    return handler


def test_success_and_step_carry_their_layer():
    handler = _collect()
    try:
        step("Importing 1A.txt")
        success("Imported class '1A'")
    finally:
        logging.getLogger(BASE_LOGGER_NAME).removeHandler(handler)

    assert [(r.layer, r.getMessage()) for r in handler.records] == [
        ("step", "Importing 1A.txt"),
        ("success", "Imported class '1A'"),
    ]


def test_formatter_prefixes_layer_icon(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    record = logging.LogRecord("class_roster", logging.INFO, __file__, 1, "Saved", None, None)
    record.layer = "success"

    assert LayeredFormatter("%(message)s").format(record) == "✓ Saved"

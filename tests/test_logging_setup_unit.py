import logging

from logging_setup import setup_logging


def test_logs_go_to_file(tmp_path, restore_checklist_logger):
    log_file = tmp_path / "logs" / "checklist.log"
    logger = setup_logging(log_file, "DEBUG")

    logging.getLogger("checklist.save").warning("disk full")
    for h in logger.handlers:
        h.flush()

    assert "WARNING checklist.save: disk full" in log_file.read_text(encoding="utf-8")
    assert logger.propagate is False


def test_repeated_setup_replaces_handler(tmp_path, restore_checklist_logger):
    setup_logging(tmp_path / "a.log")
    logger = setup_logging(tmp_path / "b.log")
    assert len(logger.handlers) == 1
    assert logger.handlers[0].baseFilename.endswith("b.log")

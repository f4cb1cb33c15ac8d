"""Tests for logging setup."""

from loguru import logger

from mindnotes.utils.logger import get_logger, setup_logging


def test_file_sink_created(tmp_path):
    log_dir = tmp_path / "logs"

    setup_logging(level="DEBUG", log_to_file=True, log_dir=str(log_dir), serialize=False)
    get_logger("tests").info("hello from tests")
    logger.complete()

    assert log_dir.is_dir()
    assert any(log_dir.iterdir())
    setup_logging(log_to_file=False)


def test_get_logger_binds_module():
    bound = get_logger("mindnotes.sample")
    messages = []
    sink_id = logger.add(lambda message: messages.append(message.record["extra"]), level="INFO")
    try:
        bound.info("bound message")
    finally:
        logger.remove(sink_id)

    assert messages == [{"module": "mindnotes.sample"}]

import logging

from battlenet_api.utils import get_logger, setup_logging


def test_setup_logging_debug_enables_sdk_logger():
    root_level = logging.getLogger().level
    try:
        logger = setup_logging(level=logging.WARNING, debug=True)

        assert logger.name == "battlenet_api"
        assert logger.level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING
    finally:
        logging.getLogger("battlenet_api").setLevel(logging.NOTSET)
        logging.getLogger().setLevel(root_level)


def test_get_logger_level():
    logger = get_logger("battlenet_api.tests", logging.ERROR)

    assert logger.level == logging.ERROR

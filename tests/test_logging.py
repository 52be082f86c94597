"""Tests for verbose logging control."""

import logging

from hcptf.logging import disable_verbose, enable_verbose, is_valid_level


class TestVerboseLogging:
    """enable_verbose / disable_verbose."""

    def test_enable_adds_stream_handler(self):
        logger = logging.getLogger("hcptf")
        try:
            enable_verbose("INFO")
            assert logger.level == logging.INFO
            streams = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
            assert len(streams) == 1
        finally:
            disable_verbose()

    def test_enable_twice_keeps_one_handler(self):
        logger = logging.getLogger("hcptf")
        try:
            enable_verbose()
            enable_verbose()
            streams = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
            assert len(streams) == 1
        finally:
            disable_verbose()

    def test_disable_keeps_null_handler(self):
        enable_verbose()
        disable_verbose()
        logger = logging.getLogger("hcptf")
        assert logger.level == logging.WARNING
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_format(self, capsys):
        try:
            enable_verbose("DEBUG", format="%(name)s|%(message)s")
            logging.getLogger("hcptf.router").debug("hello")
        finally:
            disable_verbose()
        assert "hcptf.router|hello" in capsys.readouterr().err

    def test_is_valid_level(self):
        assert is_valid_level("debug")
        assert is_valid_level("WARNING")
        assert not is_valid_level("loud")

import sys
from unittest import mock

from parallel_range.config import LoggingConfig
from parallel_range.utils.logging import setup_logging


class TestLogging:
    """Test the logging configuration."""

    def test_setup_logging(self):
        """Test setting up logging with color and a log file."""
        with mock.patch("logging.getLogger") as mock_get_logger, \
             mock.patch("logging.StreamHandler") as mock_stream_handler, \
             mock.patch("parallel_range.utils.logging.RotatingFileHandler") as mock_file_handler, \
             mock.patch("colorlog.ColoredFormatter") as mock_color_formatter, \
             mock.patch("logging.Formatter") as mock_formatter, \
             mock.patch("parallel_range.utils.logging.os.makedirs") as mock_makedirs:

            mock_root_logger = mock.MagicMock()
            mock_get_logger.return_value = mock_root_logger

            mock_stream_handler_instance = mock.MagicMock()
            mock_stream_handler.return_value = mock_stream_handler_instance

            mock_file_handler_instance = mock.MagicMock()
            mock_file_handler.return_value = mock_file_handler_instance

            mock_color_formatter_instance = mock.MagicMock()
            mock_color_formatter.return_value = mock_color_formatter_instance

            mock_formatter_instance = mock.MagicMock()
            mock_formatter.return_value = mock_formatter_instance

            cfg = LoggingConfig(
                level="INFO",
                log_dir="/tmp/logs",
                max_size_mb=10,
                backup_count=5,
                use_color=True,
                log_to_file=True,
            )

            setup_logging(cfg)

            mock_makedirs.assert_called_once()
            assert mock_makedirs.call_args.kwargs == {"exist_ok": True}
            mock_get_logger.assert_any_call()
            mock_root_logger.setLevel.assert_any_call("INFO")

            # Check formatters
            mock_color_formatter.assert_called_once()
            mock_formatter.assert_called_once()

            # Check handlers
            mock_stream_handler.assert_called_once_with(sys.stdout)
            mock_stream_handler_instance.setFormatter.assert_called_once_with(mock_color_formatter_instance)

            mock_file_handler.assert_called_once()
            assert mock_file_handler.call_args.kwargs["maxBytes"] == 10 * 1024 * 1024
            assert mock_file_handler.call_args.kwargs["backupCount"] == 5
            mock_file_handler_instance.setFormatter.assert_called_once_with(mock_formatter_instance)

            assert mock_root_logger.addHandler.call_count == 2
            mock_root_logger.addHandler.assert_any_call(mock_stream_handler_instance)
            mock_root_logger.addHandler.assert_any_call(mock_file_handler_instance)

    def test_setup_logging_no_color_no_file(self):
        """Test setting up console-only logging without color."""
        with mock.patch("logging.getLogger") as mock_get_logger, \
             mock.patch("logging.StreamHandler") as mock_stream_handler, \
             mock.patch("parallel_range.utils.logging.RotatingFileHandler") as mock_file_handler, \
             mock.patch("colorlog.ColoredFormatter") as mock_color_formatter, \
             mock.patch("logging.Formatter") as mock_formatter, \
             mock.patch("parallel_range.utils.logging.os.makedirs") as mock_makedirs:

            mock_root_logger = mock.MagicMock()
            mock_get_logger.return_value = mock_root_logger

            mock_stream_handler_instance = mock.MagicMock()
            mock_stream_handler.return_value = mock_stream_handler_instance

            mock_formatter_instance = mock.MagicMock()
            mock_formatter.return_value = mock_formatter_instance

            setup_logging(LoggingConfig(level="DEBUG", use_color=False, log_to_file=False))

            mock_color_formatter.assert_not_called()
            mock_file_handler.assert_not_called()
            mock_makedirs.assert_not_called()
            mock_stream_handler_instance.setFormatter.assert_called_once_with(mock_formatter_instance)
            mock_root_logger.addHandler.assert_called_once_with(mock_stream_handler_instance)

"""
Tests for Configuration and Logging Setup
"""

import logging
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trello_client.config import Config, config
from trello_client.log import setup_logging


class TestConfig:
    """Tests for configuration defaults."""
    
    def test_api_defaults(self):
        """Test the default API settings."""
        cfg = Config()
        
        assert cfg.api.base_url == "https://api.trello.com/1"
        assert cfg.api.form_content_type == "application/x-www-form-urlencoded"
        assert cfg.api.key_param == "key"
        assert cfg.api.token_param == "token"
        assert cfg.api.timeout_seconds > 0
    
    def test_log_file_path(self):
        """Test that the log file path joins directory and filename."""
        cfg = Config()
        
        assert cfg.log.log_file_path == Path("logs") / "trello_client.log"


class TestSetupLogging:
    """Tests for logger configuration."""
    
    @pytest.fixture(autouse=True)
    def reset_logger(self):
        yield
        logger = logging.getLogger("trello_client")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
    
    def test_console_only(self):
        """Test that a console handler is installed at the requested level."""
        logger = setup_logging("warning")
        
        assert logger.name == "trello_client"
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING
    
    def test_default_level_from_config(self):
        """Test that no level falls back to the configured one."""
        logger = setup_logging()
        
        assert logger.handlers[0].level == logging.INFO
    
    def test_unknown_level(self):
        """Test that an unknown level name raises ValueError."""
        with pytest.raises(ValueError, match="VERBOSE"):
            setup_logging("verbose")
    
    def test_repeat_calls_do_not_stack(self):
        """Test that calling setup twice keeps a single handler."""
        setup_logging()
        logger = setup_logging()
        
        assert len(logger.handlers) == 1
    
    def test_file_handler(self, tmp_path, monkeypatch):
        """Test that the file handler writes under the log directory."""
        monkeypatch.setattr(config.log, "log_directory", tmp_path / "logs")
        
        logger = setup_logging("INFO", log_to_file=True)
        logging.getLogger("trello_client.api.client").debug("GET https://api.trello.com/1/x -> 200")
        for handler in logger.handlers:
            handler.flush()
        
        log_file = tmp_path / "logs" / "trello_client.log"
        assert log_file.exists()
        assert "GET https://api.trello.com/1/x -> 200" in log_file.read_text(encoding="utf-8")


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])

"""
Test script for the configuration and logging setup.
"""
import logging
import os
import tempfile

from src.config import (
    Config,
    InvalidConfigurationError,
    check_depth,
    get_default_config,
)
from src.controller import GameSettings
from src.logger import setup_logger


def _expect_invalid(config):
    try:
        config.validate()
    except InvalidConfigurationError:
        return
    raise AssertionError("Configuration should have been rejected")


def test_default_config():
    config = get_default_config()
    assert config.validate() is config
    assert config.players.black == "human"
    assert config.players.white == "ai"
    assert config.players.ai_depth == 3
    assert config.game.max_moves == 60


def test_config_save_and_load():
    """Test saving and loading a config."""
    config = get_default_config()
    config.players.ai_depth = 5
    config.tournament.depths = [1, 4]

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "nested", "config.json")
        config.save(path)
        loaded = Config.load(path)

    assert loaded.to_dict() == config.to_dict()
    assert loaded.players.ai_depth == 5


def test_from_dict_fills_defaults():
    config = Config.from_dict({'players': {'black': 'ai'}})
    assert config.players.black == "ai"
    assert config.players.white == "ai"
    assert config.game.max_moves == 60


def test_invalid_values_rejected():
    for depth in (0, 16, -3):
        config = get_default_config()
        config.players.ai_depth = depth
        _expect_invalid(config)

    config = get_default_config()
    config.players.white = "robot"
    _expect_invalid(config)

    config = get_default_config()
    config.tournament.depths = [2, 20]
    _expect_invalid(config)

    config = get_default_config()
    config.game.max_moves = 0
    _expect_invalid(config)


def test_check_depth():
    assert check_depth(1) == 1
    assert check_depth(15) == 15
    for bad in (0, 16, 2.5, True, "3"):
        try:
            check_depth(bad)
        except InvalidConfigurationError as e:
            assert isinstance(e, ValueError)
            continue
        raise AssertionError(f"{bad!r} should be rejected")


def test_game_settings_from_config():
    config = get_default_config()
    config.players.black = "ai"
    config.players.ai_depth = 2
    config.game.max_moves = 30
    settings = GameSettings.from_config(config)
    assert settings == GameSettings(black="ai", white="ai", ai_depth=2, max_moves=30)
    assert settings.ai_vs_ai


def test_logger_writes_file():
    with tempfile.TemporaryDirectory() as tmp:
        config = get_default_config()
        config.logging.log_dir = tmp
        config.logging.log_to_file = True
        logger = setup_logger(config)
        try:
            logger.log_metrics({'games': 2, 'score': 0.5}, step=1)
            logging.getLogger("src.test").info("hello")
        finally:
            logger.close()

        assert logger.console not in logging.getLogger().handlers
        log_file = os.path.join(logger.run_dir, 'games.log')
        assert os.path.exists(os.path.join(logger.run_dir, 'config.json'))
        with open(log_file) as f:
            text = f.read()
        assert "Step 1: games=2 score=0.5000" in text
        assert "hello" in text


if __name__ == "__main__":
    test_default_config()
    test_config_save_and_load()
    test_from_dict_fills_defaults()
    test_invalid_values_rejected()
    test_check_depth()
    test_game_settings_from_config()
    test_logger_writes_file()
    print("Config tests completed successfully!")

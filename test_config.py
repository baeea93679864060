"""
Test script for configuration and logging setup.
"""
import os
import logging
from pathlib import Path

import pytest

from src.config import Config, SearchConfig, DEPTH_MAX, get_default_config
from src.logger import setup_logger

DEFAULT_CONFIG = Path(__file__).parent / "configs" / "default_config.json"


def test_config_creation(tmp_path):
    """Test creating, saving and loading a config."""
    config = get_default_config()
    assert config.search.depth == DEPTH_MAX
    assert config.search.pruning
    assert config.game.human == -1
    assert config.game.computer == 1

    test_path = str(tmp_path / "test_config.json")
    config.save(test_path)
    loaded_config = Config.load(test_path)
    assert config.to_dict() == loaded_config.to_dict()


def test_default_config_file():
    """The shipped config file holds the defaults."""
    config = Config.load(str(DEFAULT_CONFIG))
    assert config.to_dict() == get_default_config().to_dict()


def test_partial_dict():
    config = Config.from_dict({'search': {'depth': 2}, 'game': {'human_side': 'white'}})
    assert config.search.depth == 2
    assert config.search.pass_aware
    assert config.game.human == 1
    assert config.game.computer == -1


def test_invalid_values():
    with pytest.raises(ValueError):
        Config.from_dict({'search': {'depth': 0}})
    with pytest.raises(ValueError):
        Config.from_dict({'game': {'human_side': 'red'}})
    with pytest.raises(ValueError):
        SearchConfig(workers=0).validate()
    with pytest.raises(TypeError):
        Config.from_dict({'search': {'unknown': 1}})


def test_logger_writes_file(tmp_path):
    config = get_default_config()
    config.logging.log_dir = str(tmp_path)
    config.logging.log_to_file = True
    config.logging.log_level = "INFO"

    logger = setup_logger(config)
    try:
        logger.log_metrics({'wins_a': 3, 'margin_a': 1.5}, step=4, prefix='match/')
        logging.getLogger('src.test').info("hello")
    finally:
        logger.close()

    log_file = os.path.join(logger.run_dir, 'othello.log')
    with open(log_file) as f:
        text = f.read()
    assert "match/wins_a=3" in text
    assert "match/margin_a=1.5000" in text
    assert "hello" in text
    assert os.path.exists(os.path.join(logger.run_dir, 'config.json'))


if __name__ == "__main__":
    test_default_config_file()
    test_partial_dict()
    test_invalid_values()
    print("Config test completed successfully!")

"""Tests for configuration management."""

import pytest
import tempfile
import yaml
from pathlib import Path

from config.config_manager import (
    BoardConfig,
    ConfigManager,
    LoggingConfig,
    ReputationRules,
    VotingConfig,
)
from core.error_handler import ConfigError
from models.board import Board


class TestConfigManager:
    """Test suite for ConfigManager."""

    @pytest.fixture
    def temp_config_dir(self):
        """Create temporary directory for test configuration."""
        with tempfile.TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    @pytest.fixture
    def sample_config(self):
        """Sample configuration dictionary."""
        return {
            'board': {
                'default_name': 'Python Help'
            },
            'reputation': {
                'question_up_vote': 5,
                'question_down_vote': 0,
                'answer_up_vote': 10,
                'answer_down_vote': -1,
                'accepted_answer': 15
            },
            'voting': {
                'switch_policy': 'move'
            },
            'logging': {
                'level': 'INFO',
                'log_path': '',
                'format': '%(levelname)s %(message)s'
            }
        }

    @pytest.fixture
    def config_path(self, temp_config_dir, sample_config):
        """Write the sample configuration and return its path."""
        path = temp_config_dir / "settings.yaml"
        with open(path, 'w') as f:
            yaml.dump(sample_config, f)
        return path

    def test_load_bundled_defaults(self, temp_config_dir):
        """Test a missing user file falls back to the bundled settings."""
        manager = ConfigManager(temp_config_dir / "missing.yaml")

        assert manager.get_config('board', 'default_name') == 'Unit Testing'
        assert manager.get_reputation_rules() == ReputationRules()
        assert manager.get_voting_config().switch_policy == 'move'
        assert not (temp_config_dir / "missing.yaml").exists()

    def test_load_user_config(self, config_path):
        """Test loading a complete user configuration."""
        manager = ConfigManager(config_path)

        assert manager.get_config('board', 'default_name') == 'Python Help'
        assert manager.get_config('reputation', 'accepted_answer') == 15
        assert manager.get_config('logging', 'format') == '%(levelname)s %(message)s'

    def test_get_config_section(self, config_path):
        """Test getting entire configuration section."""
        manager = ConfigManager(config_path)
        reputation = manager.get_config('reputation')

        assert isinstance(reputation, dict)
        assert reputation['answer_down_vote'] == -1

    def test_get_config_unknown_key(self, config_path):
        """Test unknown sections and keys raise KeyError."""
        manager = ConfigManager(config_path)

        with pytest.raises(KeyError):
            manager.get_config('network')
        with pytest.raises(KeyError):
            manager.get_config('board', 'colour')

    def test_set_and_save_config(self, config_path):
        """Test setting a value and saving it to file."""
        manager = ConfigManager(config_path)
        manager.set_config('voting', 'switch_policy', 'reject')
        manager.save_config()

        with open(config_path, 'r') as f:
            saved_config = yaml.safe_load(f)

        assert saved_config['voting']['switch_policy'] == 'reject'
        assert ConfigManager(config_path).get_voting_config().switch_policy == 'reject'

    def test_merge_configs(self, temp_config_dir):
        """Test merging a partial user config over defaults."""
        config_path = temp_config_dir / "settings.yaml"
        with open(config_path, 'w') as f:
            yaml.dump({'reputation': {'accepted_answer': 25}}, f)

        manager = ConfigManager(config_path)

        assert manager.get_config('reputation', 'accepted_answer') == 25
        assert manager.get_config('reputation', 'answer_up_vote') == 10
        assert manager.get_config('board', 'default_name') == 'Unit Testing'

    def test_env_override(self, config_path, monkeypatch):
        """Test environment variable overrides."""
        monkeypatch.setenv('OVERBOARD_REPUTATION__ACCEPTED_ANSWER', '20')
        monkeypatch.setenv('OVERBOARD_REPUTATION__ANSWER_DOWN_VOTE', '-2')
        monkeypatch.setenv('OVERBOARD_VOTING__SWITCH_POLICY', 'reject')

        manager = ConfigManager(config_path)

        assert manager.get_config('reputation', 'accepted_answer') == 20
        assert manager.get_config('reputation', 'answer_down_vote') == -2
        assert manager.get_config('voting', 'switch_policy') == 'reject'

    def test_env_override_ignores_unknown_section(self, config_path, monkeypatch):
        """Test overrides for unknown sections are skipped."""
        monkeypatch.setenv('OVERBOARD_NETWORK__PORT', '9000')

        manager = ConfigManager(config_path)

        with pytest.raises(KeyError):
            manager.get_config('network')

    def test_env_override_does_not_persist(self, config_path, monkeypatch):
        """Test that environment variable overrides don't persist to file."""
        monkeypatch.setenv('OVERBOARD_BOARD__DEFAULT_NAME', 'From Env')

        manager = ConfigManager(config_path)
        assert manager.get_config('board', 'default_name') == 'From Env'

        with open(config_path, 'r') as f:
            saved_config = yaml.safe_load(f)
        assert saved_config['board']['default_name'] == 'Python Help'

    def test_validation_invalid_type(self, temp_config_dir, sample_config):
        """Test validation fails with invalid field type."""
        config_path = temp_config_dir / "settings.yaml"
        sample_config['reputation']['answer_up_vote'] = "ten"

        with open(config_path, 'w') as f:
            yaml.dump(sample_config, f)

        with pytest.raises(ValueError, match="must be of type"):
            ConfigManager(config_path)

    def test_validation_rejects_boolean_points(self, temp_config_dir, sample_config):
        """Test a boolean is not accepted as a point value."""
        config_path = temp_config_dir / "settings.yaml"
        sample_config['reputation']['accepted_answer'] = True

        with open(config_path, 'w') as f:
            yaml.dump(sample_config, f)

        with pytest.raises(ConfigError, match="must be of type"):
            ConfigManager(config_path)

    def test_validation_out_of_range(self, temp_config_dir, sample_config):
        """Test validation fails with out of range value."""
        config_path = temp_config_dir / "settings.yaml"
        sample_config['reputation']['question_up_vote'] = 5000

        with open(config_path, 'w') as f:
            yaml.dump(sample_config, f)

        with pytest.raises(ValueError, match="must be <="):
            ConfigManager(config_path)

    def test_validation_unknown_switch_policy(self, temp_config_dir, sample_config):
        """Test validation fails with an unknown switch policy."""
        config_path = temp_config_dir / "settings.yaml"
        sample_config['voting']['switch_policy'] = 'sometimes'

        with open(config_path, 'w') as f:
            yaml.dump(sample_config, f)

        with pytest.raises(ConfigError, match="switch_policy"):
            ConfigManager(config_path)

    def test_invalid_yaml(self, temp_config_dir):
        """Test malformed YAML raises a ConfigError."""
        config_path = temp_config_dir / "settings.yaml"
        config_path.write_text("board: [unclosed\n", encoding='utf-8')

        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigManager(config_path)

    def test_env_override_ignores_unknown_key(self, config_path, monkeypatch):
        """Test overrides for keys a section does not define are skipped."""
        monkeypatch.setenv('OVERBOARD_VOTING__WINDOW', '3')

        manager = ConfigManager(config_path)

        assert 'window' not in manager.get_config('voting')
        assert manager.get_voting_config() == VotingConfig(switch_policy='move')

    def test_validation_unknown_field(self, temp_config_dir, sample_config):
        """Test a field the section does not define is refused."""
        config_path = temp_config_dir / "settings.yaml"
        sample_config['reputation']['bonus'] = 3

        with open(config_path, 'w') as f:
            yaml.dump(sample_config, f)

        with pytest.raises(ConfigError, match="Unknown field"):
            ConfigManager(config_path)

    def test_top_level_must_be_mapping(self, temp_config_dir):
        """Test a YAML document that is not a mapping raises a ConfigError."""
        config_path = temp_config_dir / "settings.yaml"
        with open(config_path, 'w') as f:
            yaml.dump(['board', 'voting'], f)

        with pytest.raises(ConfigError, match="must contain a mapping"):
            ConfigManager(config_path)

    def test_section_must_be_mapping(self, temp_config_dir, monkeypatch):
        """Test a section replaced by a scalar is refused, even with overrides set."""
        config_path = temp_config_dir / "settings.yaml"
        with open(config_path, 'w') as f:
            yaml.dump({'voting': 'move'}, f)
        monkeypatch.setenv('OVERBOARD_VOTING__SWITCH_POLICY', 'reject')

        with pytest.raises(ConfigError, match="section: voting"):
            ConfigManager(config_path)

    def test_dataclass_accessors(self, config_path):
        """Test typed accessors."""
        manager = ConfigManager(config_path)

        assert manager.get_board_config() == BoardConfig(default_name='Python Help')
        assert isinstance(manager.get_reputation_rules(), ReputationRules)
        assert manager.get_voting_config() == VotingConfig(switch_policy='move')

        logging_config = manager.get_logging_config()
        assert isinstance(logging_config, LoggingConfig)
        assert logging_config.level == 'INFO'

    def test_expand_path(self, config_path):
        """Test path expansion with ~."""
        manager = ConfigManager(config_path)

        expanded = manager.expand_path("~/.overboard/logs/app.log")
        assert str(expanded).startswith(str(Path.home()))
        assert not str(expanded).startswith("~")

    def test_board_from_config(self, temp_config_dir, sample_config):
        """Test building a board from configuration."""
        config_path = temp_config_dir / "settings.yaml"
        sample_config['reputation']['accepted_answer'] = 50
        sample_config['voting']['switch_policy'] = 'reject'

        with open(config_path, 'w') as f:
            yaml.dump(sample_config, f)

        manager = ConfigManager(config_path)
        board = Board.from_config(manager)

        assert board.name == 'Python Help'
        assert board.switch_policy == 'reject'
        assert board.reputation_calculator.rules.accepted_answer == 50
        assert Board.from_config(manager, "Other").name == "Other"

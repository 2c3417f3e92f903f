"""Tests for config loading."""

import pytest

from resume_studio.config import AppConfig, LLMConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.model == "claude-sonnet-4-5-20250929"
        assert config.llm.temperature == 0.7
        assert config.llm.max_tokens == 1500
        assert config.export.page_size == "A4"
        assert config.export.print_background is True
        assert config.render.default_template == "modern"

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == AppConfig()

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("llm:\n  model: test-model\nexport:\n  timeout: 5\n")
        config = load_config(yaml_path)
        assert config.llm.model == "test-model"
        assert config.export.timeout == 5
        # Defaults for unspecified
        assert config.llm.max_retries == 3
        assert config.render.default_template == "modern"

    def test_empty_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_unknown_key_rejected(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("llm:\n  haiku_model: x\n")
        with pytest.raises(TypeError):
            load_config(yaml_path)

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"

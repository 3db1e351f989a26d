import pytest
from pathlib import Path

from opinionminer.config import DEFAULT_CONFIG, load_config


class TestConfig:
    def test_defaults_without_path(self):
        config = load_config()
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_yaml_overrides_are_merged(self, tmp_path):
        cfg = tmp_path / "opinion.yaml"
        cfg.write_text("analysis:\n  bins: 4\n", encoding="utf-8")
        config = load_config(cfg)
        assert config["analysis"]["bins"] == 4
        assert config["analysis"]["stem"] is False
        assert config["logging"]["level"] == "INFO"

    def test_relative_lexicon_paths_resolve_against_config(self, tmp_path):
        cfg = tmp_path / "opinion.yaml"
        cfg.write_text("lexicon:\n  positive: words/positive.txt\n", encoding="utf-8")
        config = load_config(cfg)
        assert Path(config["lexicon"]["positive"]) == tmp_path / "words" / "positive.txt"
        assert config["lexicon"]["negative"] is None

    def test_empty_yaml_gives_defaults(self, tmp_path):
        cfg = tmp_path / "empty.yaml"
        cfg.write_text("", encoding="utf-8")
        assert load_config(cfg) == DEFAULT_CONFIG

    def test_non_mapping_yaml_raises(self, tmp_path):
        from opinionminer.exceptions import ConfigError

        cfg = tmp_path / "list.yaml"
        cfg.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(cfg)

    def test_missing_config_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_lexicon_from_yaml_config(self, tmp_path):
        from opinionminer.analyzers.lexicon import LexiconStore

        (tmp_path / "neg.txt").write_text("meh\n", encoding="utf-8")
        cfg = tmp_path / "opinion.yaml"
        cfg.write_text("lexicon:\n  negative: neg.txt\n", encoding="utf-8")
        lex = LexiconStore.from_config(load_config(cfg))
        assert lex.polarity_of("meh").negative
        assert lex.polarity_of("terrible") is None
        assert lex.polarity_of("happy").positive

"""Tests for Settings configuration model."""

from src.config import Settings


class TestToneRange:
    def test_defaults(self):
        s = Settings()
        assert s.tone_range() == (1.0, 10.0)

    def test_custom_bounds(self):
        s = Settings(tone_min=0, tone_max=5)
        assert s.tone_range() == (0.0, 5.0)

    def test_swapped_bounds_are_reordered(self):
        s = Settings(tone_min=10, tone_max=1)
        assert s.tone_range() == (1.0, 10.0)


class TestDefaults:
    def test_default_log_level(self):
        s = Settings()
        assert s.log_level == "INFO"

    def test_default_preset_empty(self):
        s = Settings()
        assert s.default_preset == ""

    def test_default_clipboard_history(self):
        s = Settings()
        assert s.clipboard_history_size == 20

    def test_env_ignored_under_pytest(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "INFO"

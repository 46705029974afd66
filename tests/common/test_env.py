"""Tests for environment configuration interface."""

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_database_path_default(self, monkeypatch):
        """Test database_path returns default value."""
        monkeypatch.delenv("TBR_DATABASE_PATH", raising=False)
        result = Environment.database_path()
        assert str(result) == "data/tbr.db"

    def test_database_path_from_env(self, monkeypatch):
        """Test database_path reads from environment."""
        monkeypatch.setenv("TBR_DATABASE_PATH", "/tmp/books.db")
        result = Environment.database_path()
        assert str(result) == "/tmp/books.db"

    def test_log_level_default(self, monkeypatch):
        """Test log_level returns default value."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Environment.log_level() == "WARNING"

    def test_log_level_is_upper_cased(self, monkeypatch):
        """Test log_level normalizes case."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Environment.log_level() == "DEBUG"


class TestEnvSingleton:
    """Tests for env singleton instance."""

    def test_env_is_environment_instance(self):
        """Test that env is an instance of Environment."""
        assert isinstance(env, Environment)

    def test_env_singleton_methods_work(self, monkeypatch):
        """Test that env singleton methods work."""
        monkeypatch.setenv("TBR_DATABASE_PATH", "other.db")
        assert str(env.database_path()) == "other.db"

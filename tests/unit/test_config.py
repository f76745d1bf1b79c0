import pytest

from tenet.config import TenetConfig, find_project_root, load_config
from tenet.errors import ConfigError


@pytest.fixture
def project(tmp_path):
    (tmp_path / "pkg").mkdir()
    return tmp_path


def write_pyproject(root, body):
    (root / "pyproject.toml").write_text(body)


class TestLoadConfig:
    def test_defaults_without_pyproject(self, tmp_path):
        config = load_config(start=tmp_path, env={})

        assert config == TenetConfig()
        assert config.reporter == "ConsoleReporter"
        assert config.swallow_output is True

    def test_reads_tool_table_from_parent(self, project):
        write_pyproject(project, '[tool.tenet]\ndebug = true\nreporter = "MemoryReporter"\n')

        config = load_config(start=project / "pkg", env={})

        assert config.debug is True
        assert config.reporter == "MemoryReporter"
        assert find_project_root(project / "pkg") == project.resolve()

    def test_env_overrides(self, project):
        write_pyproject(project, "[tool.tenet]\ndebug = false\n")

        config = load_config(start=project, env={"TENET_DEBUG": "yes", "TENET_REPORTER": "x.y:Z"})

        assert config.debug is True
        assert config.reporter == "x.y:Z"

    def test_reads_process_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TENET_DEBUG", "1")

        assert load_config(start=tmp_path).debug is True

    def test_bad_env_boolean(self, tmp_path):
        with pytest.raises(ConfigError, match="TENET_DEBUG"):
            load_config(start=tmp_path, env={"TENET_DEBUG": "maybe"})

    def test_unknown_key(self, project):
        write_pyproject(project, "[tool.tenet]\nverbose = 3\n")

        with pytest.raises(ConfigError):
            load_config(start=project, env={})

    def test_invalid_toml(self, project):
        write_pyproject(project, "[tool.tenet\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(start=project, env={})

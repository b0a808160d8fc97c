"""
Unit tests for YAML reading and CLI default loading.
"""
import pytest

from rnafoldml.errors import ConfigError
from rnafoldml.utils.config_utils import load_cli_defaults, read_yaml


def _write(tmp_path, text, name="config.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_yaml_returns_mapping(tmp_path):
    assert read_yaml(_write(tmp_path, "engine: akutsu\n")) == {"engine": "akutsu"}


def test_read_yaml_empty_file_is_empty_mapping(tmp_path):
    assert read_yaml(_write(tmp_path, "")) == {}


def test_read_yaml_rejects_other_suffixes(tmp_path):
    with pytest.raises(ConfigError):
        read_yaml(_write(tmp_path, "engine: akutsu\n", name="config.json"))


def test_read_yaml_rejects_malformed_yaml(tmp_path):
    with pytest.raises(ConfigError):
        read_yaml(_write(tmp_path, "engine: [akutsu\n"))


def test_load_cli_defaults(tmp_path):
    path = _write(tmp_path, "engine: akutsu\njson: true\nmultilayer: true\nverbose: 1\nlog_file: run.log\n")
    assert load_cli_defaults(path) == {
        "engine": "akutsu",
        "json": True,
        "multilayer": True,
        "verbose": 1,
        "log_file": "run.log",
    }


@pytest.mark.parametrize(
    "text",
    [
        "- engine\n- akutsu\n",        # not a mapping
        "temperature: 37\n",          # unknown key
        "json: 'yes please'\n",       # wrong type
        "verbose: true\n",            # bool where a count is expected
    ],
)
def test_load_cli_defaults_rejects_bad_documents(tmp_path, text):
    with pytest.raises(ConfigError):
        load_cli_defaults(_write(tmp_path, text))

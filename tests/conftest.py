"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from number_parser.config_models import NumberParserConfig
from number_parser.observability import CollectingHook


@pytest.fixture
def temp_output_dir(tmp_path) -> Path:
    """Create temporary output directory for tests."""
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    return out_dir


@pytest.fixture
def output_config(temp_output_dir) -> NumberParserConfig:
    """Default configuration writing into the temporary output directory."""
    return NumberParserConfig(output_dir=temp_output_dir)


@pytest.fixture
def collecting_hook() -> CollectingHook:
    """Hook that records emitted events."""
    return CollectingHook()


@pytest.fixture
def sample_config_file(tmp_path, temp_output_dir) -> Path:
    """Create a sample configuration file."""
    config = {
        "output_dir": str(temp_output_dir),
        "file_stem": "sorted",
        "xml_declaration": True,
    }
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(config, indent=2))
    return config_file


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch) -> Path:
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path

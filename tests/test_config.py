import pytest
from pydantic import ValidationError

from miden_playground.config import InitPolicy, PlaygroundConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PLAYGROUND_ENGINE", "PLAYGROUND_INIT_POLICY", "PLAYGROUND_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = PlaygroundConfig.from_env()
    assert config.engine == ""
    assert config.init_policy is InitPolicy.ONCE
    assert config.log_level == "WARNING"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PLAYGROUND_ENGINE", " miden_wasm ")
    monkeypatch.setenv("PLAYGROUND_INIT_POLICY", "PER_CALL")
    monkeypatch.setenv("PLAYGROUND_LOG_LEVEL", "debug")

    config = PlaygroundConfig.from_env()

    assert config.engine == "miden_wasm"
    assert config.init_policy is InitPolicy.PER_CALL
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [("PLAYGROUND_INIT_POLICY", "sometimes"), ("PLAYGROUND_LOG_LEVEL", "LOUD")],
)
def test_rejects_unknown_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        PlaygroundConfig.from_env()

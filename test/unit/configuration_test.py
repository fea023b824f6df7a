import pytest
from pydantic import ValidationError as PydanticValidationError

from hedera_agent_core.shared.configuration import AgentMode, Context, OperatorConfig
from hedera_agent_core.shared.errors import ValidationError


def test_context_defaults_to_autonomous():
    context = Context()

    assert context.mode == AgentMode.AUTONOMOUS
    assert context.account_id is None


def test_context_accepts_mode_value():
    assert Context(mode="returnBytes").mode == AgentMode.RETURN_BYTES


def test_context_is_immutable():
    context = Context(account_id="0.0.1001")

    with pytest.raises(PydanticValidationError):
        context.account_id = "0.0.2002"


def test_operator_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("ACCOUNT_ID", "0.0.1001")
    monkeypatch.setenv("PRIVATE_KEY", "abcd")
    monkeypatch.setenv("HEDERA_NETWORK", "mainnet")

    config = OperatorConfig.from_env(str(tmp_path / "missing.env"))

    assert config.account_id == "0.0.1001"
    assert config.private_key == "abcd"
    assert config.network == "mainnet"
    assert "abcd" not in repr(config)


def test_operator_config_reads_dotenv_file(monkeypatch, tmp_path):
    for name in ("ACCOUNT_ID", "PRIVATE_KEY", "HEDERA_NETWORK"):
        monkeypatch.delenv(name, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("ACCOUNT_ID=0.0.3003\nPRIVATE_KEY=beef\n")

    config = OperatorConfig.from_env(str(env_file))

    assert config.account_id == "0.0.3003"
    assert config.network == "testnet"


def test_operator_config_missing_values(monkeypatch, tmp_path):
    monkeypatch.delenv("ACCOUNT_ID", raising=False)
    monkeypatch.delenv("PRIVATE_KEY", raising=False)

    with pytest.raises(ValidationError, match="ACCOUNT_ID, PRIVATE_KEY"):
        OperatorConfig.from_env(str(tmp_path / "missing.env"))

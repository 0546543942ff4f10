#!/usr/bin/env python3
"""
Tests for environment configuration
"""

import pytest

from zkgov.deployment.config import DeployConfig

ENV_VARS = (
    "RPC_URL", "PRIVATE_KEY", "CHAIN_ID", "ARTIFACTS_DIR",
    "DEPLOYMENT_FILE", "GAS_LIMIT", "RECEIPT_TIMEOUT", "LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Unset variables fall back to local development defaults"""
    config = DeployConfig.from_env()

    assert config.rpc_url == "http://localhost:8545"
    assert config.private_key is None
    assert config.chain_id is None
    assert config.artifacts_dir == "artifacts"
    assert config.deployment_file == "deployment.json"
    assert config.gas_limit is None
    assert config.receipt_timeout == 300
    assert config.log_file == "deploy.log"


def test_reads_environment(monkeypatch):
    """Every variable is picked up"""
    monkeypatch.setenv("RPC_URL", "https://sepolia.example.org")
    monkeypatch.setenv("PRIVATE_KEY", "0x" + "ab" * 32)
    monkeypatch.setenv("CHAIN_ID", "11155111")
    monkeypatch.setenv("ARTIFACTS_DIR", "build/artifacts")
    monkeypatch.setenv("DEPLOYMENT_FILE", "sepolia.json")
    monkeypatch.setenv("GAS_LIMIT", "5000000")
    monkeypatch.setenv("RECEIPT_TIMEOUT", "600")
    monkeypatch.setenv("LOG_FILE", "sepolia.log")

    config = DeployConfig.from_env()

    assert config.rpc_url == "https://sepolia.example.org"
    assert config.private_key == "0x" + "ab" * 32
    assert config.chain_id == 11155111
    assert config.artifacts_dir == "build/artifacts"
    assert config.deployment_file == "sepolia.json"
    assert config.gas_limit == 5_000_000
    assert config.receipt_timeout == 600
    assert config.log_file == "sepolia.log"


def test_empty_values_are_unset(monkeypatch):
    """Empty strings behave like unset variables"""
    monkeypatch.setenv("PRIVATE_KEY", "")
    monkeypatch.setenv("CHAIN_ID", "")
    monkeypatch.setenv("LOG_FILE", "")

    config = DeployConfig.from_env()

    assert config.private_key is None
    assert config.chain_id is None
    assert config.log_file is None


@pytest.mark.parametrize("name", ["CHAIN_ID", "GAS_LIMIT", "RECEIPT_TIMEOUT"])
def test_invalid_integer(monkeypatch, name):
    """Non-integer values name the offending variable"""
    monkeypatch.setenv(name, "lots")

    with pytest.raises(ValueError, match=name):
        DeployConfig.from_env()

from unittest.mock import MagicMock

import pytest

from miden_playground.models import FormState

RESULT = {
    "account_code_commitment": "0x2e3c7a1d",
    "account_delta_nonce": "Some(2)",
    "account_delta_storage": "AccountStorageDelta { cleared_items: [], updated_items: [] }",
    "account_delta_vault": "AccountVaultDelta { added_assets: [100], removed_assets: [] }",
    "account_hash": "0x9a0be1c4",
    "account_storage_commitment": "0x51f0d6aa",
    "account_vault_commitment": "0x7c41e802",
    "cycle_count": 42,
    "trace_length": 65536,
}


@pytest.fixture
def engine() -> MagicMock:
    """Synchronous engine that loads and returns RESULT."""
    mock = MagicMock()
    mock.init.return_value = None
    mock.execute.return_value = dict(RESULT)
    return mock


@pytest.fixture
def form() -> FormState:
    return FormState(
        note_script="begin push.1 drop end",
        account_code="export.::miden::contracts::wallets::basic::receive_asset",
        transaction_script="begin end",
    )


@pytest.fixture
def record() -> dict:
    return dict(RESULT)

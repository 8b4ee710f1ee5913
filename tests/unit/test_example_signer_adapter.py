"""Tests for ExampleSignerAdapter (template/reference adapter)."""

from unittest.mock import MagicMock

from certifier.ledger.example_signer_adapter import ExampleSignerAdapter
from certifier.ledger.transaction import StampTransaction, build_stamp_transaction


def _transaction(storage_id: str = "blob-1") -> StampTransaction:
    return build_stamp_transaction(
        package_id="0xpkg",
        module="walrus_stamp",
        function="stamp_file",
        storage_id=storage_id,
        digest="d" * 64,
        file_name="a.txt",
        gas_budget=1,
        sender=ExampleSignerAdapter.DEFAULT_ACCOUNT,
    )


class TestExampleSignerAdapter:
    def test_has_active_account(self) -> None:
        assert ExampleSignerAdapter().active_account() == ExampleSignerAdapter.DEFAULT_ACCOUNT

    def test_can_have_no_account(self) -> None:
        assert ExampleSignerAdapter(account=None).active_account() is None

    def test_reports_success_synchronously(self) -> None:
        on_success, on_error = MagicMock(), MagicMock()

        ExampleSignerAdapter().sign_and_execute(
            _transaction(), chain="sui:testnet", on_success=on_success, on_error=on_error
        )

        on_success.assert_called_once()
        on_error.assert_not_called()
        assert on_success.call_args.args[0].startswith("0x")

    def test_digest_depends_on_transaction(self) -> None:
        digests: list[str] = []
        adapter = ExampleSignerAdapter()
        for storage_id in ("blob-1", "blob-1", "blob-2"):
            adapter.sign_and_execute(
                _transaction(storage_id),
                chain="sui:testnet",
                on_success=digests.append,
                on_error=MagicMock(),
            )
        assert digests[0] == digests[1]
        assert digests[0] != digests[2]

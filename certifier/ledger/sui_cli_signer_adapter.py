import json
import subprocess

from certifier.ledger.exceptions import SignerError
from certifier.ledger.signer_base import BaseWalletSigner, ErrorCallback, SuccessCallback
from certifier.ledger.transaction import StampTransaction
from certifier.logging.logger import Log


class SuiCliSignerAdapter(BaseWalletSigner):
    """Signer backed by the local ``sui`` CLI keystore and active environment."""

    def __init__(self, *, cli_path: str = "sui", timeout_seconds: float | None = None) -> None:
        self._cli_path = cli_path
        self._timeout_seconds = timeout_seconds

    def active_account(self) -> str | None:
        try:
            completed = self._run("client", "active-address")
        except SignerError as exc:
            Log.warning(f"No active Sui account: {exc}")
            return None
        if completed.returncode != 0:
            Log.warning(f"No active Sui account: {completed.stderr.strip()}")
            return None
        address = completed.stdout.strip()
        return address or None

    def sign_and_execute(
        self,
        transaction: StampTransaction,
        *,
        chain: str,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        self._ensure_environment(chain)
        args = [json.dumps(vector) for vector in transaction.argument_vectors()]
        completed = self._run(
            "client",
            "call",
            "--package",
            transaction.package_id,
            "--module",
            transaction.module,
            "--function",
            transaction.function,
            "--args",
            *args,
            "--gas-budget",
            str(transaction.gas_budget),
            "--json",
        )
        if completed.returncode != 0:
            on_error(completed.stderr.strip() or completed.stdout.strip())
            return

        try:
            result = json.loads(completed.stdout)
        except json.JSONDecodeError:
            on_error(f"Unexpected sui CLI output: {completed.stdout.strip()}")
            return

        status = result.get("effects", {}).get("status", {})
        if status.get("status", "success") != "success":
            on_error(status.get("error", ""))
            return
        digest = result.get("digest")
        if not digest:
            on_error("sui CLI reported no transaction digest")
            return
        on_success(digest)

    def _ensure_environment(self, chain: str) -> None:
        expected = chain.split(":", 1)[-1]
        completed = self._run("client", "active-env")
        active = completed.stdout.strip()
        if completed.returncode != 0 or active != expected:
            raise SignerError(
                f"sui CLI active environment is '{active}', expected '{expected}' for {chain}"
            )

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        command = [self._cli_path, *args]
        Log.debug(f"Running {' '.join(command)}")
        try:
            return subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout_seconds,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise SignerError(f"Could not run {self._cli_path}: {exc}") from exc

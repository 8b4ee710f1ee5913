from certifier.config.settings import Settings
from certifier.ledger.example_signer_adapter import ExampleSignerAdapter
from certifier.ledger.signer_base import BaseWalletSigner
from certifier.ledger.submitter import AttestationSubmitter
from certifier.ledger.sui_cli_signer_adapter import SuiCliSignerAdapter


class SignerFactory:
    """Creates the configured wallet signer adapter."""

    SUPPORTED = ("example", "sui_cli")

    @classmethod
    def create(cls, settings: Settings) -> BaseWalletSigner:
        name = settings.signer.lower()
        if name == "example":
            return ExampleSignerAdapter()
        if name == "sui_cli":
            return SuiCliSignerAdapter(cli_path=settings.sui_cli_path)
        raise ValueError(f"Unknown signer '{name}'. Choose from: {list(cls.SUPPORTED)}")


def build_submitter(settings: Settings, signer: BaseWalletSigner | None = None) -> AttestationSubmitter:
    """Build an AttestationSubmitter bound to the configured contract entry point."""
    return AttestationSubmitter(
        signer=signer if signer is not None else SignerFactory.create(settings),
        package_id=settings.sui_package_id,
        module=settings.sui_module,
        function=settings.sui_function,
        chain=settings.sui_chain,
        gas_budget=settings.sui_gas_budget,
    )

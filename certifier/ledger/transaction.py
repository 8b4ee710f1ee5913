from dataclasses import dataclass


@dataclass(frozen=True)
class StampTransaction:
    """A move call stamping one file; arguments are UTF-8 byte arrays."""

    package_id: str
    module: str
    function: str
    arguments: tuple[bytes, ...]
    gas_budget: int
    sender: str

    @property
    def target(self) -> str:
        return f"{self.package_id}::{self.module}::{self.function}"

    def argument_vectors(self) -> list[list[int]]:
        """Arguments as ``vector<u8>`` literals."""
        return [list(argument) for argument in self.arguments]


def build_stamp_transaction(
    *,
    package_id: str,
    module: str,
    function: str,
    storage_id: str,
    digest: str,
    file_name: str,
    gas_budget: int,
    sender: str,
) -> StampTransaction:
    """Build the stamp call with (storage id, digest, file name) in that order."""
    return StampTransaction(
        package_id=package_id,
        module=module,
        function=function,
        arguments=(
            storage_id.encode("utf-8"),
            digest.encode("utf-8"),
            file_name.encode("utf-8"),
        ),
        gas_budget=gas_budget,
        sender=sender,
    )

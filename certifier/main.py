import argparse
import sys

from certifier.config.settings import Settings
from certifier.files.exceptions import FileReadError
from certifier.files.file_loader import FileLoader
from certifier.logging.logger import Log
from certifier.workflow.factory import build_controller
from certifier.workflow.states import WorkflowState


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="certifier",
        description="Fingerprint a file, store it on Walrus and stamp it on Sui.",
    )
    parser.add_argument("path", help="file to certify")
    parser.add_argument(
        "--upload-only",
        action="store_true",
        help="store the file without stamping it on the ledger",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build controller -> certify one file."""
    args = parse_args(argv)
    settings = Settings()

    try:
        file = FileLoader().load(args.path)
    except FileReadError as exc:
        Log.configure(settings.log_level)
        Log.error(str(exc))
        return 1

    with build_controller(settings) as controller:
        controller.select_file(file)
        if controller.state is WorkflowState.ERROR:
            Log.error(f"Certification failed: {controller.last_error}")
            return 1
        if args.upload_only:
            controller.upload()
        else:
            controller.upload_and_stamp()

        if controller.state is WorkflowState.ERROR or controller.last_error:
            Log.error(f"Certification failed: {controller.last_error}")
            return 1

        print(f"sha256:   {controller.digest}")
        print(f"blob:     {controller.storage_id}")
        aggregator_url = settings.walrus_aggregator_url.rstrip("/")
        print(f"url:      {aggregator_url}/v1/blobs/{controller.storage_id}")
        record = controller.record
        if record is not None:
            print(f"tx:       {record.ledger_transaction_id}")
            print(f"explorer: {record.transaction_url(settings.sui_explorer_url)}")
        elif controller.state is WorkflowState.STAMPING:
            print("tx:       submitted, awaiting finality")
    return 0


if __name__ == "__main__":
    sys.exit(main())

from pathlib import Path
from unittest.mock import patch

import pytest

from certifier.fingerprint.exceptions import HashingError
from certifier.fingerprint.fingerprint import FingerprintEngine
from certifier.main import main, parse_args
from certifier.workflow.controller import WorkflowController


@pytest.fixture()
def offline_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BLOB_STORE", "memory")
    monkeypatch.setenv("SIGNER", "example")
    return tmp_path


class TestParseArgs:
    def test_defaults_to_full_certification(self) -> None:
        args = parse_args(["report.pdf"])

        assert args.path == "report.pdf"
        assert args.upload_only is False

    def test_upload_only_flag(self) -> None:
        assert parse_args(["report.pdf", "--upload-only"]).upload_only is True


class TestMain:
    def test_certifies_file(
        self, offline_env: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = offline_env / "report.txt"
        path.write_bytes(b"hello")

        exit_code = main([str(path)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824" in out
        assert "tx:       0x" in out
        assert "explorer: https://suiscan.xyz/testnet/tx/0x" in out

    def test_upload_only_skips_stamping(
        self, offline_env: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = offline_env / "report.txt"
        path.write_bytes(b"hello")

        exit_code = main([str(path), "--upload-only"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "blob:" in out
        assert "tx:" not in out

    def test_missing_file_fails(self, offline_env: Path) -> None:
        assert main([str(offline_env / "missing.pdf")]) == 1

    def test_unknown_blob_store_raises(
        self, offline_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = offline_env / "report.txt"
        path.write_bytes(b"hello")
        monkeypatch.setenv("BLOB_STORE", "ftp")

        with pytest.raises(ValueError, match="Unknown blob store"):
            main([str(path)])

    def test_hashing_failure_reports_its_own_cause(self, offline_env: Path) -> None:
        path = offline_env / "report.txt"
        path.write_bytes(b"hello")
        failure = HashingError("Failed to calculate file hash for report.txt: disk error")

        with (
            patch.object(FingerprintEngine, "fingerprint", side_effect=failure),
            patch.object(WorkflowController, "upload_and_stamp") as upload_and_stamp,
            patch("certifier.main.Log") as log,
        ):
            exit_code = main([str(path)])

        assert exit_code == 1
        upload_and_stamp.assert_not_called()
        log.error.assert_called_once_with(
            "Certification failed: Failed to calculate file hash for report.txt: disk error"
        )

import pytest

from certifier.storage.exceptions import IdentifierMissingError
from certifier.storage.identifier import extract_blob_id, probe


class TestExtractBlobId:
    def test_top_level_blob_id(self) -> None:
        assert extract_blob_id({"blobId": "abc123"}) == "abc123"

    def test_newly_created_blob_object(self) -> None:
        payload = {"newlyCreated": {"blobObject": {"blobId": "xyz"}}}
        assert extract_blob_id(payload) == "xyz"

    def test_generic_id(self) -> None:
        assert extract_blob_id({"id": "generic"}) == "generic"

    def test_nested_blob_id(self) -> None:
        assert extract_blob_id({"blob": {"id": "nested"}}) == "nested"

    def test_already_certified(self) -> None:
        payload = {"alreadyCertified": {"blobId": "known", "endEpoch": 3}}
        assert extract_blob_id(payload) == "known"

    def test_newly_created_wins_over_top_level(self) -> None:
        payload = {
            "newlyCreated": {"blobObject": {"blobId": "first"}},
            "blobId": "second",
            "id": "third",
        }
        assert extract_blob_id(payload) == "first"

    def test_skips_empty_values(self) -> None:
        assert extract_blob_id({"blobId": "", "id": "fallback"}) == "fallback"

    def test_integer_identifier_is_rendered_as_string(self) -> None:
        assert extract_blob_id({"id": 42}) == "42"

    def test_raises_when_no_shape_matches(self) -> None:
        payload = {"status": "ok", "blob": {"size": 10}}
        with pytest.raises(IdentifierMissingError) as exc_info:
            extract_blob_id(payload)
        assert exc_info.value.response == payload
        assert "status" in str(exc_info.value)

    def test_raises_for_non_object_payload(self) -> None:
        with pytest.raises(IdentifierMissingError):
            extract_blob_id(["abc"])


class TestProbe:
    def test_returns_none_through_non_dict(self) -> None:
        assert probe({"blob": "flat"}, ("blob", "id")) is None

    def test_ignores_booleans(self) -> None:
        assert probe({"id": True}, ("id",)) is None

"""Testes para normalize_response, NormalizedResult e parsing de erros Meta."""

from __future__ import annotations

from whatsapp_cloud.connectors.meta_errors import is_transient_failure, parse_meta_error
from whatsapp_cloud.connectors.normalizer import NormalizedResult, normalize_response
from whatsapp_cloud.connectors.transport import RawOutcome


def _failure(body: object, raw: str, status: int | None = 400) -> RawOutcome:
    return RawOutcome(ok=False, status_code=status, body=body, raw_body=raw)


class TestNormalizeResponse:
    def test_success_wraps_body(self) -> None:
        outcome = RawOutcome(ok=True, status_code=200, body={"id": "1"}, raw_body='{"id": "1"}')
        result = normalize_response(outcome)
        assert result.ok is True
        assert result.data == {"id": "1"}
        assert result.to_dict() == {"status": "success", "data": {"id": "1"}}

    def test_structured_error_is_spread(self) -> None:
        result = normalize_response(_failure({"error": {"message": "x"}}, '{"error": {"message": "x"}}'))
        assert result.ok is False
        assert result.to_dict() == {"status": "failed", "message": "x"}
        assert result.message == "x"

    def test_json_without_error_key_is_spread(self) -> None:
        result = normalize_response(_failure(None, '{"detail": "nope"}'))
        assert result.to_dict() == {"status": "failed", "detail": "nope"}

    def test_non_json_body_falls_back_to_raw_text(self) -> None:
        result = normalize_response(_failure(None, "<html>Bad Gateway</html>", status=502))
        assert result.to_dict() == {"status": "failed", "error": "<html>Bad Gateway</html>"}
        assert result.status_code == 502

    def test_transport_failure_without_status(self) -> None:
        result = normalize_response(_failure(None, "connection refused", status=None))
        assert result.to_dict() == {"status": "failed", "error": "connection refused"}

    def test_json_list_body_falls_back_to_raw_text(self) -> None:
        result = normalize_response(_failure([1, 2], "[1, 2]"))
        assert result.to_dict() == {"status": "failed", "error": "[1, 2]"}


class TestNormalizedResult:
    def test_with_request_body_keeps_outcome(self) -> None:
        result = NormalizedResult.failure({"message": "x"}, status_code=400)
        enriched = result.with_request_body({"to": "1"})
        assert enriched.request_body == {"to": "1"}
        assert enriched.status == "failed"
        assert enriched.status_code == 400

    def test_success_factory(self) -> None:
        assert NormalizedResult.success().to_dict() == {"status": "success", "data": None}


class TestMetaErrors:
    def test_parse_meta_error(self) -> None:
        error = parse_meta_error(
            {"error": {"type": "OAuthException", "code": 190, "message": "expired", "fbtrace_id": "abc"}},
            401,
        )
        assert error is not None
        assert error.code == 190
        assert error.type == "OAuthException"
        assert error.is_permanent is True
        assert error.fbtrace_id == "abc"

    def test_parse_meta_error_without_error(self) -> None:
        assert parse_meta_error({"messages": []}) is None
        assert parse_meta_error("not a dict") is None

    def test_throttling_code_is_transient(self) -> None:
        error = parse_meta_error({"error": {"code": 130429, "message": "rate"}}, 400)
        assert error is not None
        assert error.is_permanent is False

    def test_explicit_transient_flag_wins(self) -> None:
        error = parse_meta_error({"error": {"code": 1, "is_transient": True}}, 400)
        assert error is not None
        assert error.is_permanent is False

    def test_classification_by_status(self) -> None:
        assert is_transient_failure(429) is True
        assert is_transient_failure(503) is True
        assert is_transient_failure(None) is True
        assert is_transient_failure(404) is False

"""
Unit tests for the response processor and request sending.
"""

import httpx
import pytest

from ergo_node.core.errors import ConfigError, DecodeError, RequestError, TransportError
from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import ErgoBox


def _response(status: int, **kwargs) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request("GET", "http://node.test/x"), **kwargs)


class TestProcessResponse:

    def test_success_decodes_shape(self, make_box):
        boxes = process_response(_response(200, json=[make_box(0), make_box(1)]), list[ErgoBox])
        assert [b.box_id for b in boxes] == [f"{1:064x}", f"{2:064x}"]

    def test_success_plain_string(self):
        assert process_response(_response(200, json="OK"), str) == "OK"

    def test_schema_mismatch_is_decode_error(self):
        with pytest.raises(DecodeError):
            process_response(_response(200, json={"boxId": "only"}), ErgoBox)

    def test_invalid_json_is_decode_error(self):
        with pytest.raises(DecodeError):
            process_response(_response(200, content=b"<html>oops</html>"), str)

    def test_error_uses_node_detail(self):
        body = {"error": 400, "reason": "bad.request", "detail": "Wallet is locked"}
        with pytest.raises(RequestError) as exc_info:
            process_response(_response(400, json=body), str)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Wallet is locked"
        assert "Wallet is locked" in str(exc_info.value)

    def test_error_falls_back_to_reason(self):
        with pytest.raises(RequestError) as exc_info:
            process_response(_response(403, json={"error": 403, "reason": "Invalid api key"}), str)
        assert exc_info.value.message == "Invalid api key"

    def test_error_plain_text_body(self):
        with pytest.raises(RequestError) as exc_info:
            process_response(_response(502, text="Bad Gateway"), str)
        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"

    def test_error_empty_body(self):
        with pytest.raises(RequestError) as exc_info:
            process_response(_response(500), str)
        assert exc_info.value.message is None

    def test_error_is_not_decoded_even_if_body_matches(self):
        with pytest.raises(RequestError):
            process_response(_response(404, json="OK"), str)


class TestSend:

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(TransportError) as exc_info:
                await send(client, "GET", "http://node.test/info")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(slow)) as client:
            with pytest.raises(TransportError):
                await send(client, "GET", "http://node.test/info")

    @pytest.mark.asyncio
    async def test_single_request_no_retry(self):
        seen = []

        def fail(request):
            seen.append(request)
            return httpx.Response(503, json={"error": 503, "reason": "unavailable"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(fail)) as client:
            response = await send(client, "GET", "http://node.test/info")
        assert response.status_code == 503
        assert len(seen) == 1


class TestJoinUrl:

    def test_segments(self):
        assert join_url("http://n:9053", "blocks", "at", 5) == "http://n:9053/blocks/at/5"

    def test_keeps_base_path(self):
        assert join_url("https://host/ergo/", "info") == "https://host/ergo/info"

    def test_segments_are_escaped(self):
        assert join_url("http://n", "a b", "c/d") == "http://n/a%20b/c%2Fd"

    def test_no_segments(self):
        assert join_url("http://n", ) == "http://n"

    def test_requires_scheme(self):
        with pytest.raises(ConfigError):
            join_url("node", "info")

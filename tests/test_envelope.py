from __future__ import annotations

import json

import pytest

from thecamp.envelope import Envelope, decode_envelope, decode_nested, require
from thecamp.errors import DecodeError, ProtocolError

from tests.helpers import envelope_bytes, nested_bytes


class TestDecodeEnvelope:
    def test_decodes_all_fields(self):
        env = decode_envelope(envelope_bytes(200, {"a": 1}, message="OK"))

        assert env == Envelope(code=200, message="OK", data={"a": 1})
        assert env.ok

    def test_non_success_code_is_returned_not_raised(self):
        env = decode_envelope(envelope_bytes(401, None, message="denied"))

        assert env.code == 401
        assert not env.ok

    @pytest.mark.parametrize("body", [b"", b"   \n", ""])
    def test_empty_body_is_zero_envelope(self, body):
        env = decode_envelope(body)

        assert env == Envelope()
        assert env.code == 0
        assert env.data is None

    def test_malformed_json_raises_decode_error(self):
        with pytest.raises(DecodeError, match="Malformed JSON"):
            decode_envelope(b"{not json")

    def test_non_object_raises_protocol_error(self):
        with pytest.raises(ProtocolError, match="object envelope"):
            decode_envelope(b"[1, 2, 3]")

    def test_string_result_code_raises_protocol_error(self):
        with pytest.raises(ProtocolError, match="resultCode"):
            decode_envelope(json.dumps({"resultCode": "200"}).encode())

    def test_null_result_code_reads_as_zero(self):
        env = decode_envelope(b'{"resultCode": null, "resultMessage": "oops"}')

        assert env.code == 0
        assert not env.ok
        assert env.message == "oops"

    def test_missing_message_defaults_to_empty(self):
        env = decode_envelope(b'{"resultCode": 200}')

        assert env.message == ""
        assert env.data is None


class TestDecodeNested:
    def test_decodes_double_encoded_field(self):
        env = decode_envelope(nested_bytes("list2", {"result_code": 200, "my_group": []}))

        assert decode_nested(env, "list2") == {"result_code": 200, "my_group": []}

    def test_accepts_already_decoded_object(self):
        env = Envelope(code=200, data={"group": {"result_code": 200, "trainee_info": {}}})

        assert decode_nested(env, "group")["trainee_info"] == {}

    def test_inner_code_mismatch_raises_even_when_outer_ok(self):
        env = decode_envelope(nested_bytes("list2", {"result_code": 500}))

        assert env.ok
        with pytest.raises(ProtocolError, match="nested result code 500"):
            decode_nested(env, "list2")

    def test_outer_code_mismatch_raises(self):
        env = decode_envelope(nested_bytes("list2", {"result_code": 200}, code=403))

        with pytest.raises(ProtocolError, match="result code 403"):
            decode_nested(env, "list2")

    def test_missing_field_raises(self):
        env = Envelope(code=200, data={"other": "{}"})

        with pytest.raises(ProtocolError, match="Missing field 'list'"):
            decode_nested(env, "list")

    def test_missing_data_raises(self):
        with pytest.raises(ProtocolError, match="resultData"):
            decode_nested(Envelope(code=200), "list")

    def test_malformed_nested_json_raises_decode_error(self):
        env = Envelope(code=200, data={"list": "{broken"})

        with pytest.raises(DecodeError, match="field 'list'"):
            decode_nested(env, "list")

    def test_nested_non_object_raises(self):
        env = Envelope(code=200, data={"list": "[1]"})

        with pytest.raises(ProtocolError, match="not an object"):
            decode_nested(env, "list")

    def test_missing_inner_code_raises(self):
        env = Envelope(code=200, data={"list": "{}"})

        with pytest.raises(ProtocolError, match="result_code"):
            decode_nested(env, "list")


class TestRequire:
    def test_returns_value(self):
        assert require({"n": 3}, "n", int) == 3

    def test_rejects_bool_for_int(self):
        with pytest.raises(ProtocolError, match="bool"):
            require({"n": True}, "n", int)

    def test_rejects_wrong_type(self):
        with pytest.raises(ProtocolError, match="unexpected type str"):
            require({"n": "3"}, "n", int)

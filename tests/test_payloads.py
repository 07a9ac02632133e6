import allure
import pytest

from data_storage.errors import EncodingPrecondition, LayoutError
from data_storage.payloads import (
    ClosePayload,
    CreatePayload,
    EditPayload,
    decode_payload,
    encode_label,
    encode_payload,
)


@allure.feature("Instruction payloads")
@allure.story("Encode payloads")
class TestEncodePayload:
    def test_create_payload(self):
        payload = encode_payload(CreatePayload(label="hello", data=bytes([1, 2, 3])))
        assert payload == bytes.fromhex("0068656c6c6f") + bytes(25) + bytes([1, 2, 3])
        assert len(payload) == 1 + 30 + 3

    def test_create_payload_without_data(self):
        assert encode_payload(CreatePayload(label="", data=b"")) == bytes(31)

    def test_create_payload_full_label(self):
        payload = encode_payload(CreatePayload(label="A" * 30, data=b"z"))
        assert payload == b"\x00" + b"A" * 30 + b"z"

    def test_edit_payload(self):
        assert encode_payload(EditPayload(new_data=b"new data")) == b"\x01new data"

    def test_edit_payload_empty(self):
        assert encode_payload(EditPayload(new_data=b"")) == b"\x01"

    def test_close_payload(self):
        assert encode_payload(ClosePayload()) == b"\x02"

    @pytest.mark.parametrize(
        "payload, discriminator",
        [
            (CreatePayload(label="label", data=b"\x02"), 0),
            (EditPayload(new_data=b"\x00"), 1),
            (ClosePayload(), 2),
        ],
    )
    def test_discriminator(self, payload, discriminator):
        assert encode_payload(payload)[0] == discriminator

    def test_label_too_long(self):
        with pytest.raises(EncodingPrecondition):
            encode_payload(CreatePayload(label="A" * 31, data=b""))

    def test_multibyte_label_too_long(self):
        # 15 characters, 30 bytes fits; one more character does not
        assert len(encode_label("я" * 15)) == 30
        with pytest.raises(EncodingPrecondition):
            encode_label("я" * 15 + "a")

    def test_data_too_long(self):
        with pytest.raises(EncodingPrecondition):
            encode_payload(EditPayload(new_data=bytes(65536)))
        assert len(encode_payload(EditPayload(new_data=bytes(65535)))) == 65536

    def test_unknown_payload(self):
        with pytest.raises(TypeError):
            encode_payload(b"\x01")


@allure.feature("Instruction payloads")
@allure.story("Decode payloads")
class TestDecodePayload:
    def test_decode_create(self):
        data = bytes.fromhex("0068656c6c6f") + bytes(25) + bytes([1, 2, 3])
        assert decode_payload(data) == CreatePayload(label="hello", data=bytes([1, 2, 3]))

    def test_decode_edit(self):
        assert decode_payload(b"\x01abc") == EditPayload(new_data=b"abc")

    def test_decode_close(self):
        assert decode_payload(b"\x02") == ClosePayload()

    def test_empty(self):
        with pytest.raises(LayoutError):
            decode_payload(b"")

    def test_unknown_discriminator(self):
        with pytest.raises(LayoutError, match="Unknown"):
            decode_payload(b"\x03")

    def test_create_label_padding_stripped(self):
        data = b"\x00" + "данные".encode("utf-8").ljust(30, b"\x00") + b"x"
        assert decode_payload(data) == CreatePayload(label="данные", data=b"x")

    def test_create_invalid_utf8_label(self):
        with pytest.raises(LayoutError, match="utf-8"):
            decode_payload(b"\x00" + b"\xff\xfe".ljust(30, b"\x00"))

    def test_short_create(self):
        with pytest.raises(LayoutError):
            decode_payload(b"\x00hello")

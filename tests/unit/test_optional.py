"""Unit tests for the tri-state Opt field and PartialModel bodies."""

import json

import pytest
from pydantic import ValidationError

from maxbot import BotAPIError, ErrorKind, Opt, decode_opt, encode_opt, some
from maxbot.codec import encode_json
from maxbot.types import BotPatch, ChatPatch, NewMessageBody, PinMessageBody, TextFormat


def test_unset_opt_is_absent():
    opt: Opt[str] = Opt()

    assert opt.present is False
    assert opt.value is None
    assert opt.get("fallback") == "fallback"
    assert repr(opt) == "Opt()"


def test_some_zero_values_are_present():
    assert some("").present is True
    assert some(False).get(True) is False
    assert some(0).value == 0
    assert repr(some("")) == "Opt.some('')"


def test_opt_equality():
    assert Opt() == Opt()
    assert some("a") == some("a")
    assert some("a") != some("b")
    assert some("") != Opt()
    assert hash(some(1)) == hash(some(1))


def test_partial_body_with_one_empty_field_has_exactly_one_key():
    body = NewMessageBody(text=some(""))

    assert encode_json(body) == b'{"text":""}'


def test_partial_body_without_fields_is_empty_object():
    assert encode_json(NewMessageBody()) == b"{}"
    assert encode_json(BotPatch()) == b"{}"


def test_present_false_and_zero_values_are_sent():
    body = ChatPatch(notify=some(False), title=some(""))

    assert json.loads(encode_json(body)) == {"notify": False, "title": ""}


def test_link_preview_flag_is_not_serialized():
    body = NewMessageBody(text=some("hi"), disable_link_preview=True)

    assert json.loads(encode_json(body)) == {"text": "hi"}


def test_enum_opt_encodes_value():
    body = NewMessageBody(text=some("*bold*"), format=some(TextFormat.MARKDOWN))

    assert json.loads(encode_json(body)) == {"text": "*bold*", "format": "markdown"}


def test_required_fields_stay_next_to_unset_opts():
    assert json.loads(encode_json(PinMessageBody(message_id="mid.1"))) == {"message_id": "mid.1"}


def test_bare_opt_encodes_null_when_unset():
    assert encode_opt(Opt()) == b"null"
    assert encode_opt(some("x")) == b'"x"'
    assert encode_opt(some(False)) == b"false"


def test_decode_null_leaves_field_absent():
    assert decode_opt(b"null", str).present is False
    assert decode_opt(b'""', str) == some("")
    assert decode_opt("42", int) == some(42)


def test_decode_wrong_type_is_decode_error():
    with pytest.raises(BotAPIError) as exc_info:
        decode_opt(b"1", str)

    assert exc_info.value.kind is ErrorKind.DECODE
    assert isinstance(exc_info.value.unwrap(), ValidationError)


def test_model_decode_treats_null_and_missing_alike():
    missing = NewMessageBody.model_validate_json("{}")
    null = NewMessageBody.model_validate_json('{"text": null}')
    empty = NewMessageBody.model_validate_json('{"text": ""}')

    assert missing.text == Opt()
    assert null.text == Opt()
    assert empty.text == some("")


def test_model_decode_validates_inner_type():
    with pytest.raises(ValidationError):
        ChatPatch.model_validate_json('{"notify": "loud"}')


def test_partial_body_round_trip():
    original = ChatPatch(title=some(""), pin=some("mid.7"))

    decoded = ChatPatch.model_validate_json(encode_json(original))

    assert decoded == original
    assert decoded.notify.present is False

import json
from dataclasses import dataclass

import pytest

from s5kit.messages import (
    DebugMessage,
    ErrorMessage,
    InfoMessage,
    Message,
    TraceMessage,
)


@dataclass
class _Url:
    raw: str
    version_id: str = ""

    def __str__(self) -> str:
        return self.raw


class _FileObject(Message):
    def __str__(self) -> str:
        return "file"

    def json(self) -> str:
        return '{"type":"file"}'


def test_message_is_abstract():
    with pytest.raises(TypeError):
        Message()


def test_error_message_without_command_is_bare_error():
    assert str(ErrorMessage(err="boom")) == "boom"


def test_error_message_with_command_quotes_it():
    msg = ErrorMessage(err="boom", command="cp a b")
    assert str(msg) == '"cp a b": boom'


def test_error_message_json_matches_wire_format():
    msg = ErrorMessage(
        err="source must be a remote object", operation="cat", command="cat file.txt"
    )
    assert (
        msg.json()
        == '{"operation":"cat","command":"cat file.txt","error":"source must be a remote object"}'
    )


def test_error_message_json_omits_empty_fields():
    assert json.loads(ErrorMessage(err="x").json()) == {"error": "x"}


def test_debug_message_uses_job_key():
    msg = DebugMessage(err="e", operation="cp", command="cp a b")
    assert json.loads(msg.json()) == {"operation": "cp", "job": "cp a b", "error": "e"}
    assert str(DebugMessage(err="e")) == "e"


def test_trace_message_round_trip():
    msg = TraceMessage("hello world")
    assert str(msg) == "hello world"
    assert json.loads(msg.json()) == {"message": "hello world"}


def test_info_message_with_source_and_destination():
    msg = InfoMessage("cp", source=_Url("s3://bucket/a"), destination=_Url("dir/a"))
    assert str(msg) == "cp s3://bucket/a dir/a"


def test_info_message_destination_only():
    msg = InfoMessage("pipe", destination=_Url("s3://bucket/key"))
    assert str(msg) == "pipe s3://bucket/key"


def test_info_message_with_version_pads_source():
    msg = InfoMessage("ls", source=_Url("s3://bucket/key", "v1"))
    text = str(msg)
    assert text.startswith("ls s3://bucket/key ")
    assert text.endswith(" v1")
    assert len(text) == len("ls ") + 50 + len(" v1")


def test_info_message_json_with_object():
    msg = InfoMessage("pipe", destination=_Url("s3://bucket/testfile1.txt"), obj=_FileObject())
    assert json.loads(msg.json()) == {
        "operation": "pipe",
        "success": True,
        "destination": "s3://bucket/testfile1.txt",
        "object": {"type": "file"},
    }


def test_info_message_json_carries_version_id_without_destination():
    msg = InfoMessage("rm", source=_Url("s3://bucket/key", "v7"))
    data = json.loads(msg.json())
    assert data["version_id"] == "v7"
    assert data["source"] == "s3://bucket/key"
    assert data["success"] is True


def test_info_message_json_drops_version_id_with_destination():
    msg = InfoMessage("cp", source=_Url("s3://bucket/key", "v7"), destination=_Url("d"))
    assert "version_id" not in json.loads(msg.json())
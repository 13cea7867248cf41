# -*- coding: utf-8 -*-

from typing import Any, Union

ELLIPSIS: str = "..."


def read_payload(payload: Any) -> bytes:
    """
    Drains the Payload of an invoke response,
    boto3 hands back a StreamingBody, test doubles may hand back raw bytes
    :param payload:
    :return: the payload bytes, empty when absent
    """
    if payload is None:
        return b""
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    return payload.read() or b""


def to_text(body: Union[bytes, bytearray, str, None]) -> str:
    """
    Decode the caller's raw body as utf-8 text,
    invalid sequences are replaced rather than rejected
    :param body:
    :return:
    """
    if body is None:
        return ""
    if isinstance(body, str):
        return body
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    raise ValueError(f"body must be bytes or str, got {type(body).__name__}")


def truncate(s: Union[bytes, str], limit: int = 256) -> str:
    text = to_text(s)
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS

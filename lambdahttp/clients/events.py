# -*- coding: utf-8 -*-

"""
Envelopes exchanged with functions fronted by an API Gateway style proxy contract.
The remote function receives an http request shaped document
and answers with an http response shaped one.
"""

from json import dumps as json_ser, loads as json_dser
from typing import Any, Dict, NamedTuple, Union

from . import str_utils
from .errors import MalformedEnvelopeError

PATH_KEY: str = "path"
HTTP_METHOD_KEY: str = "httpMethod"
BODY_KEY: str = "body"
STATUS_CODE_KEY: str = "statusCode"

ERROR_MESSAGE_KEY: str = "errorMessage"
ERROR_TYPE_KEY: str = "errorType"
STACK_TRACE_KEY: str = "stackTrace"


class ProxyResponse(NamedTuple):
    status_code: int
    body: str


def request_payload(
    http_method: str, path: str, body: Union[bytes, str, None]
) -> bytes:
    request = {
        PATH_KEY: path,
        HTTP_METHOD_KEY: http_method,
        BODY_KEY: str_utils.to_text(body),
    }
    return json_ser(request, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def parse_response(payload: bytes) -> ProxyResponse:
    try:
        doc = json_dser(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as ex:
        raise MalformedEnvelopeError(payload, f"json.loads: {ex}") from ex

    if not isinstance(doc, dict):
        raise MalformedEnvelopeError(
            payload, f"response is a {type(doc).__name__}, not an object"
        )

    status_code = doc.get(STATUS_CODE_KEY)
    # bool is an int subclass
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        raise MalformedEnvelopeError(
            payload, f"response {STATUS_CODE_KEY} is not an integer: {status_code!r}"
        )

    body = doc.get(BODY_KEY)
    if body is None:
        body = ""
    elif not isinstance(body, str):
        raise MalformedEnvelopeError(
            payload, f"response {BODY_KEY} is not a string: {type(body).__name__}"
        )

    return ProxyResponse(status_code, body)


def parse_function_error(payload: bytes) -> Dict[str, Any]:
    """
    Best effort decode of the runtime's error document,
    {"errorMessage": ..., "errorType": ..., "stackTrace": [...]}
    """
    try:
        doc = json_dser(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return {}

    if not isinstance(doc, dict):
        return {}

    keys = [ERROR_MESSAGE_KEY, ERROR_TYPE_KEY, STACK_TRACE_KEY]
    return {k: doc[k] for k in keys if k in doc}

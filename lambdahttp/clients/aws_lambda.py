# -*- coding: utf-8 -*-

import logging
from enum import Enum
from http import HTTPStatus
from typing import Any, Mapping, Protocol, Tuple, Union

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    ReadTimeoutError,
)

from . import arn_utils, events, str_utils
from .errors import (
    DeadlineExceededError,
    DispatchError,
    EmptyPayloadError,
    FunctionExecutionError,
    InvalidClientError,
    InvalidFunctionArnError,
    LambdaClientError,
    UnexpectedInnerStatusError,
    UnexpectedPayloadError,
    UnexpectedStatusError,
)

Body = Union[bytes, str, None]

FUNCTION_NAME_KEY: str = "FunctionName"
INVOCATION_TYPE_KEY: str = "InvocationType"
LOG_TYPE_KEY: str = "LogType"
PAYLOAD_KEY: str = "Payload"
STATUS_CODE_KEY: str = "StatusCode"
FUNCTION_ERROR_KEY: str = "FunctionError"

LOG_TYPE_NONE: str = "None"

logging.basicConfig(
    format="%(asctime)s - %(message)s", level=logging.INFO, datefmt="%d-%b-%y %H:%M:%S"
)


class LambdaInvoker(Protocol):
    """The one call the adapter needs from a boto3 lambda client"""

    def invoke(self, **kwargs: Any) -> Mapping[str, Any]:
        ...


class InvocationMode(Enum):
    SYNC = ("sync", "RequestResponse", HTTPStatus.OK)
    ASYNC = ("async", "Event", HTTPStatus.ACCEPTED)

    def __init__(self, label: str, invocation_type: str, expected_status: int):
        self.label = label
        self.invocation_type = invocation_type
        self.expected_status = int(expected_status)


class LambdaClient:
    """
    Calls a lambda function as though it were an http endpoint.
    The request is wrapped in an API Gateway proxy request document,
    a sync reply is unwrapped from the matching proxy response document.
    Holds no per call state, one instance may be shared across threads.
    """

    def __init__(self, cli: LambdaInvoker, function_arn: str):
        if cli is None or not callable(getattr(cli, "invoke", None)):
            raise InvalidClientError(f"lambda client is unusable: {cli!r}")

        try:
            arn_utils.parse(function_arn)
        except ValueError as ex:
            raise InvalidFunctionArnError(function_arn, str(ex)) from ex

        self._cli = cli
        self._function_arn = function_arn

    @property
    def function_arn(self) -> str:
        return self._function_arn

    def invoke(self, http_method: str, path: str, body: Body) -> str:
        """
        Synchronously invoke the function,
        the returned text is the body of the proxy response.
        Any inner statusCode other than 200 is raised as UnexpectedInnerStatusError.
        :param http_method:
        :param path:
        :param body:
        :return:
        """
        return self._invoke_as(InvocationMode.SYNC, http_method, path, body)

    def invoke_async(self, http_method: str, path: str, body: Body) -> None:
        """
        Queue an event invocation, only the dispatch is acknowledged,
        the eventual outcome of the function is never observed.
        """
        self._invoke_as(InvocationMode.ASYNC, http_method, path, body)

    def _invoke_as(
        self, mode: InvocationMode, http_method: str, path: str, body: Body
    ) -> str:
        try:
            return self._invoke(mode, http_method, path, body)
        except LambdaClientError as ex:
            logging.warning(f"invoke[{mode.label}] {self._function_arn}: {ex}")
            raise

    def _invoke(
        self, mode: InvocationMode, http_method: str, path: str, body: Body
    ) -> str:
        payload = events.request_payload(http_method, path, body)

        logging.debug(
            f"Invoking {self._function_arn} [{mode.invocation_type}] {http_method} {path}"
        )
        output, out_payload = self._dispatch(mode, payload)

        function_error = output.get(FUNCTION_ERROR_KEY)
        if function_error:
            details = events.parse_function_error(out_payload)
            raise FunctionExecutionError(function_error, details)

        status_code = output.get(STATUS_CODE_KEY)
        if status_code != mode.expected_status:
            raise UnexpectedStatusError(status_code, mode.expected_status)

        if mode is InvocationMode.ASYNC:
            if out_payload:
                raise UnexpectedPayloadError(
                    out_payload,
                    "output.Payload is not empty for async invocation: "
                    f"[{str_utils.truncate(out_payload)}]",
                )
            return ""

        # sync invocation continues here
        if not out_payload:
            raise EmptyPayloadError("output.Payload is empty for sync invocation")

        response = events.parse_response(out_payload)
        if response.status_code != HTTPStatus.OK:
            raise UnexpectedInnerStatusError(response.status_code, response.body)

        return response.body

    def _dispatch(
        self, mode: InvocationMode, payload: bytes
    ) -> Tuple[Mapping[str, Any], bytes]:
        # boto3 streams the Payload, the network read happens on drain
        try:
            output = self._cli.invoke(
                **{
                    FUNCTION_NAME_KEY: self._function_arn,
                    INVOCATION_TYPE_KEY: mode.invocation_type,
                    LOG_TYPE_KEY: LOG_TYPE_NONE,
                    PAYLOAD_KEY: payload,
                }
            )
            if output is None:
                raise DispatchError("output is nil")

            return output, str_utils.read_payload(output.get(PAYLOAD_KEY))
        except (ConnectTimeoutError, ReadTimeoutError) as ex:
            raise DeadlineExceededError(f"cli.Invoke: {ex}", ex) from ex
        except (ClientError, BotoCoreError) as ex:
            raise DispatchError(f"cli.Invoke: {ex}", ex) from ex

#!/usr/bin/python3

import json
import logging
import os

from lambdahttp.clients import aws_config
from lambdahttp.clients.aws_lambda import LambdaClient
from lambdahttp.clients.errors import LambdaClientError

FUNCTION_ARN = os.environ.get(
    "LAMBDA_ARN", "arn:aws:lambda:ap-south-1:000000000000:function:hello-lambda"
)


def invoke_lambda(client, method, path, params, event=False):
    payload = json.dumps(params).encode("utf-8")
    try:
        if event:
            client.invoke_async(method, path, payload)
            print(f"queued {method} {path}")
        else:
            print(client.invoke(method, path, payload))
    except LambdaClientError:
        logging.exception(f"Failed {method} {path}")


cli = aws_config.lambda_client(aws_config.from_env())
client = LambdaClient(cli, FUNCTION_ARN)

invoke_lambda(client, "POST", "/path", {"key": "value"})
invoke_lambda(client, "POST", "/echo", {"att": "echo", "v": 1})
invoke_lambda(client, "GET", "/missing", {"att": "blah", "v": 2})
invoke_lambda(client, "POST", "/path", {"att": "event", "v": 3}, event=True)

import io
import logging
import os
import time
import zipfile
from json import dumps as json_ser
from typing import Any, Dict

import pytest
from botocore.response import StreamingBody
from botocore.stub import Stubber

from lambdahttp.clients import aws_config

REGION: str = "eu-central-1"
FUNCTION_ARN: str = "arn:aws:lambda:eu-central-1:000000000000:function:my-function"

LOCALSTACK_ENDPOINT_ENV: str = "LOCALSTACK_ENDPOINT"
TESTDATA_DIR: str = os.path.join(os.path.dirname(__file__), "testdata")
# LocalStack does not enforce IAM policies, any role arn will do
LAMBDA_ROLE: str = "arn:aws:iam::000000000000:role/lambda-role"
WAIT_ATTEMPTS: int = 60


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: needs a running LocalStack")


def streaming(payload: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(payload), len(payload))


def invoke_response(status_code: int, payload: bytes = b"", **extra) -> Dict[str, Any]:
    response = {"StatusCode": status_code, "Payload": streaming(payload)}
    response.update(extra)
    return response


def proxy_response(status_code: int, body: str) -> bytes:
    return json_ser({"statusCode": status_code, "body": body}).encode("utf-8")


@pytest.fixture
def lambda_cli():
    config = aws_config.ClientConfig(
        region=REGION, access_key_id="test", secret_access_key="test"
    )
    return aws_config.lambda_client(config)


@pytest.fixture
def stubber(lambda_cli):
    with Stubber(lambda_cli) as stub:
        yield stub
        stub.assert_no_pending_responses()


# LocalStack harness


@pytest.fixture(scope="session")
def localstack_cli():
    endpoint = os.environ.get(LOCALSTACK_ENDPOINT_ENV)
    if not endpoint:
        pytest.skip(f"{LOCALSTACK_ENDPOINT_ENV} not set")

    config = aws_config.ClientConfig(
        region=REGION,
        endpoint_url=endpoint,
        access_key_id="test",
        secret_access_key="test",
        read_timeout=120,
    )
    return aws_config.lambda_client(config)


@pytest.fixture(scope="session")
def localstack_function_arn(localstack_cli):
    function_name = f"lambdahttp-{int(time.time())}"
    response = localstack_cli.create_function(
        FunctionName=function_name,
        Runtime="python3.12",
        Role=LAMBDA_ROLE,
        Handler="index.handler",
        Code={"ZipFile": zip_buffer("index.py")},
    )

    wait_for_function(localstack_cli, function_name)
    yield response["FunctionArn"]

    localstack_cli.delete_function(FunctionName=function_name)


def zip_buffer(file_name: str) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.write(os.path.join(TESTDATA_DIR, file_name), arcname=file_name)
    return buf.getvalue()


def wait_for_function(cli, function_name: str) -> None:
    for _ in range(WAIT_ATTEMPTS):
        response = cli.get_function(FunctionName=function_name)
        configuration = response.get("Configuration", {})
        state = configuration.get("State")

        if state == "Active":
            return
        if state == "Failed":
            raise RuntimeError(
                f"{function_name} failed: {configuration.get('StateReason')}"
            )

        logging.info(f"Function {function_name} is {state}")
        time.sleep(1)

    raise TimeoutError(f"{function_name} not active after {WAIT_ATTEMPTS} polls")

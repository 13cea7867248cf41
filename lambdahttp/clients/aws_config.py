# -*- coding: utf-8 -*-

import os
from typing import Any, Mapping, NamedTuple, Optional

import boto3
from botocore.config import Config

DEFAULT_CONNECT_TIMEOUT: float = 5
DEFAULT_READ_TIMEOUT: float = 60

REGION_ENV: str = "AWS_REGION"
DEFAULT_REGION_ENV: str = "AWS_DEFAULT_REGION"
ENDPOINT_URL_ENV: str = "AWS_ENDPOINT_URL"
ACCESS_KEY_ID_ENV: str = "AWS_ACCESS_KEY_ID"
SECRET_ACCESS_KEY_ENV: str = "AWS_SECRET_ACCESS_KEY"
SESSION_TOKEN_ENV: str = "AWS_SESSION_TOKEN"
CONNECT_TIMEOUT_ENV: str = "LAMBDAHTTP_CONNECT_TIMEOUT"
READ_TIMEOUT_ENV: str = "LAMBDAHTTP_READ_TIMEOUT"


class ClientConfig(NamedTuple):
    region: str
    endpoint_url: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    # one attempt, botocore must not retry behind the caller's back
    max_attempts: int = 1


def from_env(environ: Mapping[str, str] = None) -> ClientConfig:
    """
    Read a ClientConfig from the given mapping (os.environ when omitted),
    the environment is only read, never written.
    Credentials left unset fall through to the default boto3 provider chain.
    :param environ:
    :return:
    """
    env = os.environ if environ is None else environ

    region = env.get(REGION_ENV) or env.get(DEFAULT_REGION_ENV)
    if not region:
        raise ValueError(f"missing {REGION_ENV} / {DEFAULT_REGION_ENV}")

    return ClientConfig(
        region=region,
        endpoint_url=env.get(ENDPOINT_URL_ENV) or None,
        access_key_id=env.get(ACCESS_KEY_ID_ENV) or None,
        secret_access_key=env.get(SECRET_ACCESS_KEY_ENV) or None,
        session_token=env.get(SESSION_TOKEN_ENV) or None,
        connect_timeout=_seconds(env, CONNECT_TIMEOUT_ENV, DEFAULT_CONNECT_TIMEOUT),
        read_timeout=_seconds(env, READ_TIMEOUT_ENV, DEFAULT_READ_TIMEOUT),
    )


def botocore_config(config: ClientConfig) -> Config:
    return Config(
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
        retries={"total_max_attempts": config.max_attempts, "mode": "standard"},
    )


def lambda_client(config: ClientConfig) -> Any:
    session = boto3.Session(
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        aws_session_token=config.session_token,
        region_name=config.region,
    )
    return session.client(
        "lambda", endpoint_url=config.endpoint_url, config=botocore_config(config)
    )


def _seconds(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if not raw:
        return default

    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{key} is not a number: {raw}") from None

    assert value > 0, f"{key} must be positive: {raw}"
    return value

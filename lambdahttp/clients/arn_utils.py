# -*- coding: utf-8 -*-

import re
from typing import Any, NamedTuple, Optional

ARN_PREFIX: str = "arn:"
ARN_SECTIONS: int = 6
RESOURCE_SEP_RE = re.compile(r"[:/]")


class Arn(NamedTuple):
    partition: str
    service: str
    region: str
    account_id: str
    resource_type: str
    resource_id: str
    qualifier: Optional[str] = None


def parse(arn: Any) -> Arn:
    """
    splits an arn of the form
    arn:<partition>:<service>:<region>:<account>:<type>[:/]<id>[:qualifier]
    every section is required, a lambda function may carry a version/alias qualifier
    :param arn:
    :return: the parsed Arn
    """
    if not isinstance(arn, str):
        raise ValueError(f"arn must be a string, got {type(arn).__name__}")
    if not arn.startswith(ARN_PREFIX):
        raise ValueError("arn: invalid prefix")

    sections = arn.split(":", ARN_SECTIONS - 1)
    if len(sections) != ARN_SECTIONS:
        raise ValueError("arn: not enough sections")

    _, partition, service, region, account_id, resource = sections
    for name, value in [
        ("partition", partition),
        ("service", service),
        ("region", region),
        ("account", account_id),
        ("resource", resource),
    ]:
        if not value:
            raise ValueError(f"arn: missing {name}")

    parts = RESOURCE_SEP_RE.split(resource, maxsplit=1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f"arn: resource [{resource}] lacks a type and id")

    resource_type, resource_id = parts
    qualifier = None
    if service == "lambda" and resource_type == "function" and ":" in resource_id:
        resource_id, qualifier = resource_id.split(":", 1)
        if not resource_id or not qualifier or ":" in qualifier:
            raise ValueError(f"arn: bad function qualifier in [{resource}]")

    return Arn(
        partition, service, region, account_id, resource_type, resource_id, qualifier
    )


def is_valid(arn: Any) -> bool:
    try:
        parse(arn)
        return True
    except ValueError:
        return False

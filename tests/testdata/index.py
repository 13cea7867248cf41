import logging
from typing import Any, Dict

Response = Dict[str, Any]

PATH_KEY: str = "path"
BODY_KEY: str = "body"
STATUS_CODE_KEY: str = "statusCode"

GREETING: str = "Hello from Lambda!"

logging.basicConfig(
    format="%(asctime)s - %(message)s", level=logging.INFO, datefmt="%d-%b-%y %H:%M:%S"
)


# Dont change the name of this function,
# its registered as the entry point in the test function config
def handler(event, context) -> Response:
    # unused
    del context

    switcher = {
        "/echo": _echo,
        "/missing": _missing,
        "/boom": _boom,
    }
    path = event.get(PATH_KEY)
    action = switcher.get(path, _greet)

    logging.info(f"{event.get('httpMethod')} {path}")
    return action(event)


def _greet(event) -> Response:
    return _response(200, GREETING)


def _echo(event) -> Response:
    return _response(200, event.get(BODY_KEY, ""))


def _missing(event) -> Response:
    return _response(404, "not found")


def _boom(event) -> Response:
    raise RuntimeError(f"boom on {event.get(PATH_KEY)}")


def _response(status_code: int, body: str) -> Response:
    return {STATUS_CODE_KEY: status_code, BODY_KEY: body}

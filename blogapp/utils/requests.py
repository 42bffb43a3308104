from flask import request

from ..errors import MalformedRequestError


def json_body() -> dict:
    """Request body as a dict, or MalformedRequestError.

    Content-Type is not checked; an empty or unparsable body and any JSON
    value other than an object all count as malformed.
    """
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise MalformedRequestError()
    return body

import json

import requests


def make_response(status_code, body=None, raw=""):
    """Build a requests.Response the way the classifier would send it."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = raw.encode("utf-8")
    return response

import json
import logging

import requests

from .config import DEFAULT_SENTIMENT_API_ENDPOINT, DEFAULT_SENTIMENT_API_TIMEOUT
from .results import Classification, ErrorKind, Result
from .schemas import PredictForm, validate_payload

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGE = "Failed to analyse sentiment with the external service."
UNAVAILABLE_MESSAGE = (
    "Could not connect to the sentiment analysis service. "
    "Make sure the classification API is running."
)
UNEXPECTED_MESSAGE = "An unexpected error occurred during sentiment analysis."
UNKNOWN_LABEL = "unknown"


def _json_or_none(response):
    try:
        return response.json()
    except ValueError:
        return None


def _extract_detail(detail):
    # FastAPI validation errors: [{"loc": [...], "msg": "...", "type": "..."}]
    if isinstance(detail, list) and detail and isinstance(detail[0], dict) and detail[0].get("msg"):
        return detail[0]["msg"]
    return detail


def _as_text(value):
    return value if isinstance(value, str) else json.dumps(value)


class ClassifierGateway:
    """
    Forwards text to the external sentiment classifier and turns whatever
    comes back into a ``Result``.

    :param endpoint: URL of the classifier's predict route.
    :param timeout: seconds to wait for the classifier before giving up.
    """

    def __init__(self, endpoint=DEFAULT_SENTIMENT_API_ENDPOINT, timeout=DEFAULT_SENTIMENT_API_TIMEOUT):
        self.endpoint = endpoint
        self.timeout = timeout

    def classify(self, text) -> Result:
        validated = validate_payload(PredictForm, {"review_text": text})
        if not validated.ok:
            return validated
        text = validated.value.review_text

        try:
            response = requests.post(self.endpoint, json={"text": text}, timeout=self.timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.error("Sentiment API connection error: %s", e)
            return Result.failure(ErrorKind.UNAVAILABLE, UNAVAILABLE_MESSAGE, 503)
        except Exception as e:
            logger.error("Unexpected error during sentiment analysis: %s", e)
            return Result.failure(ErrorKind.UNEXPECTED, UNEXPECTED_MESSAGE, 500)

        try:
            if response.ok:
                return self._success(response, text)
            return self._upstream_error(response)
        except Exception as e:
            logger.error("Unexpected error during sentiment analysis: %s", e)
            return Result.failure(ErrorKind.UNEXPECTED, UNEXPECTED_MESSAGE, 500)

    def _success(self, response, text):
        body = _json_or_none(response)
        if not isinstance(body, dict):
            body = {}

        sentiment = body.get("sentiment")
        label = str(sentiment).lower() if sentiment is not None else UNKNOWN_LABEL
        original_text = body.get("text", text)
        logger.info("Sentiment API classified text as %s", label)
        return Result.success(Classification(label=label, original_text=original_text))

    def _upstream_error(self, response):
        body = _json_or_none(response)
        message = UPSTREAM_ERROR_MESSAGE
        details = None

        if isinstance(body, dict) and "detail" in body:
            details = _extract_detail(body["detail"])
            message += " Detail: " + _as_text(details)
        elif body:
            details = body
            message += " API response: " + json.dumps(body)
        else:
            message += f" Status: {response.status_code}, Body: {response.text}"

        logger.error(
            "Sentiment API request failed: status=%s response=%s",
            response.status_code,
            response.text,
        )
        return Result.failure(ErrorKind.UPSTREAM_ERROR, message, response.status_code, details=details)

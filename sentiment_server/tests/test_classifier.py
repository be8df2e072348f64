import logging

import pytest
import requests
from unittest.mock import patch

from sentiment_server.classifier import (
    ClassifierGateway,
    UNAVAILABLE_MESSAGE,
    UNEXPECTED_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
)
from sentiment_server.results import ErrorKind
from helpers import make_response

ENDPOINT = "http://classifier.test/predict"


@pytest.fixture
def gateway():
    return ClassifierGateway(endpoint=ENDPOINT, timeout=30)


@pytest.mark.parametrize("text", ["", "a", "ab", "  ab  ", None, 123])
@patch("sentiment_server.classifier.requests.post")
def test_classify_rejects_short_text_without_calling_api(mock_post, gateway, text):
    result = gateway.classify(text)

    assert not result.ok
    assert result.error.kind == ErrorKind.VALIDATION
    assert result.error.status == 422
    assert "review_text" in result.error.errors
    mock_post.assert_not_called()


@patch("sentiment_server.classifier.requests.post")
def test_classify_lowercases_label(mock_post, gateway):
    mock_post.return_value = make_response(200, {"sentiment": "Positive", "text": "X"})

    result = gateway.classify("great movie")

    assert result.ok
    assert result.value.label == "positive"
    assert result.value.original_text == "X"
    mock_post.assert_called_once_with(ENDPOINT, json={"text": "great movie"}, timeout=30)


@patch("sentiment_server.classifier.requests.post")
def test_classify_strips_text_before_sending(mock_post, gateway):
    mock_post.return_value = make_response(200, {"sentiment": "neutral", "text": "okay"})

    gateway.classify("   okay  ")

    mock_post.assert_called_once_with(ENDPOINT, json={"text": "okay"}, timeout=30)


@patch("sentiment_server.classifier.requests.post")
def test_classify_defaults_missing_fields(mock_post, gateway):
    mock_post.return_value = make_response(200, {})

    result = gateway.classify("some text")

    assert result.value.label == "unknown"
    assert result.value.original_text == "some text"


@patch("sentiment_server.classifier.requests.post")
def test_classify_non_json_success_body(mock_post, gateway):
    mock_post.return_value = make_response(200, raw="ok")

    result = gateway.classify("some text")

    assert result.ok
    assert result.value.label == "unknown"


@patch("sentiment_server.classifier.requests.post")
def test_classify_list_detail_uses_first_msg(mock_post, gateway, caplog):
    mock_post.return_value = make_response(422, {"detail": [{"msg": "too short"}, {"msg": "other"}]})

    with caplog.at_level(logging.ERROR):
        result = gateway.classify("abc")

    assert result.error.kind == ErrorKind.UPSTREAM_ERROR
    assert result.error.status == 422
    assert "too short" in result.error.message
    assert result.error.message.startswith(UPSTREAM_ERROR_MESSAGE)
    assert result.error.details == "too short"
    assert "Sentiment API request failed" in caplog.text


@patch("sentiment_server.classifier.requests.post")
def test_classify_scalar_detail(mock_post, gateway):
    mock_post.return_value = make_response(500, {"detail": "model not loaded"})

    result = gateway.classify("abc")

    assert result.error.status == 500
    assert result.error.message == UPSTREAM_ERROR_MESSAGE + " Detail: model not loaded"
    assert result.error.details == "model not loaded"


@patch("sentiment_server.classifier.requests.post")
def test_classify_json_error_without_detail(mock_post, gateway):
    mock_post.return_value = make_response(400, {"error": "bad input"})

    result = gateway.classify("abc")

    assert result.error.status == 400
    assert result.error.details == {"error": "bad input"}
    assert "API response" in result.error.message
    assert "bad input" in result.error.message


@patch("sentiment_server.classifier.requests.post")
def test_classify_non_json_error_body(mock_post, gateway):
    mock_post.return_value = make_response(502, raw="Bad Gateway")

    result = gateway.classify("abc")

    assert result.error.status == 502
    assert result.error.details is None
    assert "Status: 502, Body: Bad Gateway" in result.error.message


@patch("sentiment_server.classifier.requests.post")
def test_classify_empty_error_body(mock_post, gateway):
    mock_post.return_value = make_response(500)

    result = gateway.classify("abc")

    assert result.error.status == 500
    assert result.error.message.endswith("Status: 500, Body: ")


@pytest.mark.parametrize("exc", [
    requests.ConnectionError("connection refused"),
    requests.ConnectTimeout("connect timed out"),
    requests.ReadTimeout("read timed out"),
])
@patch("sentiment_server.classifier.requests.post")
def test_classify_unreachable_is_503(mock_post, gateway, exc, caplog):
    mock_post.side_effect = exc

    with caplog.at_level(logging.ERROR):
        result = gateway.classify("hello there")

    assert result.error.kind == ErrorKind.UNAVAILABLE
    assert result.error.status == 503
    assert result.error.message == UNAVAILABLE_MESSAGE
    assert "Sentiment API connection error" in caplog.text


@patch("sentiment_server.classifier.requests.post")
def test_classify_unexpected_error_is_500(mock_post, gateway):
    mock_post.side_effect = RuntimeError("secret internals")

    result = gateway.classify("hello there")

    assert result.error.kind == ErrorKind.UNEXPECTED
    assert result.error.status == 500
    assert result.error.message == UNEXPECTED_MESSAGE
    assert "secret internals" not in result.error.message

from flask import Flask, request, jsonify

mock_api = Flask(__name__)

POSITIVE_WORDS = ("good", "great", "excellent", "love", "bagus")
NEGATIVE_WORDS = ("bad", "terrible", "awful", "hate", "buruk")


@mock_api.route('/predict', methods=['POST'])
def predict():
    data = request.get_json(silent=True) or {}
    text = data.get('text')

    # Same shape as a FastAPI 422
    if not isinstance(text, str) or len(text.strip()) < 3:
        return jsonify({"detail": [{
            "loc": ["body", "text"],
            "msg": "text must be at least 3 characters",
            "type": "value_error",
        }]}), 422

    lowered = text.lower()
    if any(word in lowered for word in POSITIVE_WORDS):
        sentiment = "Positive"
    elif any(word in lowered for word in NEGATIVE_WORDS):
        sentiment = "Negative"
    else:
        sentiment = "Neutral"

    return jsonify({"sentiment": sentiment, "text": text})


if __name__ == '__main__':
    mock_api.run(debug=True, port=5000)

import logging

from flask import Flask, current_app, jsonify, render_template, request

from .classifier import ClassifierGateway
from .config import configure_logging, load_settings
from .models import db
from .summary import get_summary
from . import writer

logger = logging.getLogger(__name__)


def create_app(overrides=None, gateway=None):
    app = Flask(__name__)

    # Config: environment first, then explicit overrides (tests)
    app.config.update(load_settings())
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"])

    db.init_app(app)
    with app.app_context():
        db.create_all()

    app.extensions["classifier_gateway"] = gateway or ClassifierGateway(
        endpoint=app.config["SENTIMENT_API_ENDPOINT"],
        timeout=app.config["SENTIMENT_API_TIMEOUT"],
    )

    register_routes(app)
    logger.info("Sentiment server ready, classifier at %s", app.config["SENTIMENT_API_ENDPOINT"])
    return app


def request_data():
    """JSON body when there is one, form fields otherwise."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def error_response(error, **extra):
    body = dict(extra)
    body["error"] = error.message
    if error.errors:
        body["errors"] = error.errors
    elif error.details is not None:
        body["details"] = error.details
    return jsonify(body), error.status


def register_routes(app):

    @app.route('/')
    def dashboard():
        summary = get_summary(current_app.config["DASHBOARD_LOCALE"])
        return render_template('dashboard.html', summary=summary)

    @app.route('/predict', methods=['POST'])
    def predict():
        data = request_data()
        gateway = current_app.extensions["classifier_gateway"]
        result = gateway.classify(data.get('review_text'))

        if not result.ok:
            return error_response(result.error)

        return jsonify({
            "message": "Sentiment analysis succeeded",
            "label_sentimen": result.value.label,
            "original_comment": result.value.original_text,
        })

    @app.route('/save', methods=['POST'])
    def save():
        data = request_data()
        result = writer.save(data.get('review_text'), data.get('label_sentimen'))

        if not result.ok:
            return error_response(result.error, success=False)

        return jsonify(result.value)


if __name__ == '__main__':
    create_app().run(debug=True, port=8000)

import logging
from flask import Flask, jsonify

from src.greeting import ClockUnavailable, handle, utc_now
from src.settings import configure_logging, load_settings

logger = logging.getLogger(__name__)


def create_app(clock=utc_now):
    # Initialize Flask App
    app = Flask(__name__)
    app.config['GREETING_CLOCK'] = clock

    # API ROUTES
    @app.route('/')
    def index():
        return jsonify({"message": "Greeting API is running!"})

    @app.route('/greeting', methods=['GET'])
    def get_greeting():
        try:
            body = handle(clock=app.config['GREETING_CLOCK'])
        except ClockUnavailable as e:
            logger.exception("Greeting failed")
            return jsonify({"error": "Could not read the current time", "details": str(e)}), 500
        return jsonify(body.to_dict())

    return app


if __name__ == '__main__':
    # For local dev only
    from dotenv import load_dotenv
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    configure_logging(settings)
    create_app().run(debug=True)

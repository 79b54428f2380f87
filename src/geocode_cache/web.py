from flask import Flask, Response, jsonify, request

from geocode_cache.formatting import status_code, to_json, to_plain_text
from geocode_cache.service import GeocodeService


def create_app(service: GeocodeService) -> Flask:
    """Create the Flask app exposing the three geocoding modes.

    GET /api/geocode?address=... returns JSON, reading the cache first.
    GET /api/geocode/refresh?address=... returns JSON, always re-fetching.
    GET /api/geocode/plain?address=... returns ``"<lat>, <lng>"`` as text.
    """
    app = Flask(__name__)
    app.json.ensure_ascii = False  # type: ignore[attr-defined]

    @app.after_request
    def allow_cors(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.route("/api/geocode")
    def geocode() -> tuple[Response, int]:
        outcome = service.lookup(request.args.get("address"))
        return jsonify(to_json(outcome)), status_code(outcome)

    @app.route("/api/geocode/refresh")
    def refresh() -> tuple[Response, int]:
        outcome = service.refresh(request.args.get("address"))
        return jsonify(to_json(outcome)), status_code(outcome)

    @app.route("/api/geocode/plain")
    def plain() -> tuple[Response, int]:
        outcome = service.lookup(request.args.get("address"))
        return Response(to_plain_text(outcome), mimetype="text/plain"), status_code(outcome)

    return app

"""
Flask API for the Funko collection.
Run from project root: flask --app api.app run  (or python -m api.app)
"""
import os
from typing import Optional

from flask import Flask, jsonify, request

from collection.manager import FunkoCollectionManager
from funko.models import Funko, ValidationError
from storage.files import DATA_DIR


def _listed(funko: Funko, tier) -> dict:
    data = funko.to_json()
    data["tier"] = int(tier)
    return data


def create_app(data_dir: Optional[str] = None) -> Flask:
    app = Flask(__name__)
    app.config["FUNKO_DATA_DIR"] = data_dir or os.environ.get("FUNKO_DATA_DIR") or str(DATA_DIR)

    def _manager(user: str) -> FunkoCollectionManager:
        return FunkoCollectionManager(user, app.config["FUNKO_DATA_DIR"])

    def _parse_body():
        """Return (funko, None) or (None, 400 response) for the request JSON body."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return None, (jsonify({"error": "JSON object body is required"}), 400)
        try:
            return Funko.from_json(data), None
        except ValidationError as e:
            return None, (jsonify({"error": str(e)}), 400)

    @app.errorhandler(ValidationError)
    def validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    # ===== Collection Endpoints =====

    @app.route("/api/funkos/<user>", methods=["GET"])
    def list_funkos(user: str):
        """GET /api/funkos/<user> - Every Funko with its market value tier (1-4)."""
        listed = _manager(user).list_funkos()
        return jsonify({
            "user": user,
            "data": [_listed(funko, tier) for funko, tier in listed],
            "count": len(listed),
        })

    @app.route("/api/funkos/<user>/<funko_id>", methods=["GET"])
    def show_funko(user: str, funko_id: str):
        """GET /api/funkos/<user>/<funko_id> - One Funko with its tier."""
        result = _manager(user).show_funko(funko_id)
        if not result.success:
            return jsonify({"error": result.message, "id": funko_id}), 404
        return jsonify(_listed(result.funko, result.tier))

    @app.route("/api/funkos/<user>", methods=["POST"])
    def add_funko(user: str):
        """POST /api/funkos/<user> - Add a Funko.
        Body: {id, name, description, type, genre, franchise, franchiseNumber,
               isExclusive, specialFeatures, marketValue}
        """
        funko, err = _parse_body()
        if err is not None:
            return err
        result = _manager(user).add_funko(funko)
        if not result.success:
            return jsonify({"error": result.message, "id": funko.id}), 409
        return jsonify({"success": True, "message": result.message, "id": funko.id}), 201

    @app.route("/api/funkos/<user>/<funko_id>", methods=["PUT"])
    def modify_funko(user: str, funko_id: str):
        """PUT /api/funkos/<user>/<funko_id> - Replace a Funko (body as in POST)."""
        funko, err = _parse_body()
        if err is not None:
            return err
        result = _manager(user).modify_funko(funko_id, funko)
        if not result.success:
            return jsonify({"error": result.message, "id": funko_id}), 404
        return jsonify({
            "success": True,
            "message": result.message,
            "id": funko_id,
            "policy": result.policy.value,
        })

    @app.route("/api/funkos/<user>/<funko_id>", methods=["DELETE"])
    def remove_funko(user: str, funko_id: str):
        """DELETE /api/funkos/<user>/<funko_id> - Remove a Funko."""
        result = _manager(user).remove_funko(funko_id)
        if not result.success:
            return jsonify({"error": result.message, "id": funko_id}), 404
        return jsonify({"success": True, "message": result.message, "id": funko_id})

    return app


if __name__ == "__main__":
    # Run from project root: python -m api.app  (or: flask --app api.app run)
    create_app().run(host="0.0.0.0", port=int(os.environ.get("FUNKO_API_PORT", "5000")), debug=True)

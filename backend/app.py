# backend/app.py
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from errors import BadRequest, LedgerError
from models import balances_to_dict
from service import LedgerService, quick_settle
from store import MemoryStore
import settings

logger = logging.getLogger(__name__)


def _body(kind=dict):
    data = request.get_json(silent=True)
    if not isinstance(data, kind):
        raise BadRequest(f"Request body must be a JSON {'object' if kind is dict else 'array'}")
    return data


def _field(data, name):
    value = data.get(name)
    if value is None or value == "":
        raise BadRequest("Missing required fields", field=name)
    return value


def create_app(store=None):
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": settings.CORS_ORIGINS}})  # Allows the React frontend to talk to this backend
    service = LedgerService(store if store is not None else MemoryStore())
    app.config["LEDGER_SERVICE"] = service

    @app.errorhandler(LedgerError)
    def handle_ledger_error(e):
        # integrity alarms are raised at ERROR where they are detected
        logger.warning("%s: %s", type(e).__name__, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        # Returns specific error message to the frontend if something crashes
        return jsonify({"error": str(e)}), 500

    @app.route('/api', methods=['GET'])
    def health_check():
        return jsonify({"status": "healthy", "message": "Backend is running!"})

    @app.route('/api/calculate', methods=['POST'])
    def calculate():
        data = _body(list)
        try:
            transfers = quick_settle(data)
        except (KeyError, TypeError) as e:
            raise BadRequest(f"Each expense needs payer, amount and involved: {e}")
        return jsonify([t.describe() for t in transfers])

    @app.route('/api/groups', methods=['POST'])
    def create_group():
        data = _body()
        members = _field(data, "members")
        if not isinstance(members, list):
            raise BadRequest("members must be a list", field="members")
        if not all(isinstance(m, str) and m for m in members):
            raise BadRequest("members must be non-empty strings", field="members")
        group = service.create_group(data.get("name", ""), members)
        return jsonify(group.to_dict()), 201

    @app.route('/api/groups/<group_id>', methods=['GET'])
    def get_group(group_id):
        return jsonify(service.get_group(group_id).to_dict())

    @app.route('/api/groups/<group_id>/expenses', methods=['POST'])
    def create_expense(group_id):
        data = _body()
        participants = _field(data, "participants")
        if not isinstance(participants, list):
            raise BadRequest("participants must be a list", field="participants")
        expense = service.create_expense(
            group_id,
            payer=_field(data, "paidBy"),
            total_amount=_field(data, "totalAmount"),
            participants=participants,
            policy=data.get("splitType") or "EQUAL",
            description=data.get("description", ""),
        )
        return jsonify(expense.to_dict()), 201

    @app.route('/api/groups/<group_id>/expenses', methods=['GET'])
    def list_expenses(group_id):
        return jsonify([e.to_dict() for e in service.list_expenses(group_id)])

    @app.route('/api/groups/<group_id>/expenses/<expense_id>', methods=['DELETE'])
    def delete_expense(group_id, expense_id):
        return jsonify(service.delete_expense(group_id, expense_id).to_dict())

    @app.route('/api/groups/<group_id>/balances', methods=['GET'])
    def get_balances(group_id):
        return jsonify(balances_to_dict(service.get_balances(group_id)))

    @app.route('/api/groups/<group_id>/settlements', methods=['GET'])
    def get_settlements(group_id):
        return jsonify([t.to_dict() for t in service.get_settlements(group_id)])

    return app


logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
app = create_app()

if __name__ == '__main__':
    app.run(debug=settings.DEBUG, host=settings.HOST, port=settings.PORT)

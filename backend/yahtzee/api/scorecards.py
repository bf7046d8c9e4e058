from flask import Blueprint, jsonify, abort
from yahtzee import get_archive
from yahtzee.services.games import parse_session_id


scorecards = Blueprint('scorecards', __name__)


@scorecards.route('/<string:session_id>', methods=['GET'])
def get_scorecard(session_id):
    """Archived scorecard of a finished game as JSON: {scores: [{kind, value}], total}."""
    canonical = parse_session_id(session_id)
    if canonical is None:
        abort(404)
    card = get_archive().load(canonical)
    if card is None:
        abort(404)
    return jsonify(card.to_dict())

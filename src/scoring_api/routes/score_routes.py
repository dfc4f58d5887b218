"""Routes for scoring and comparing poker hands."""

from flask import Blueprint, current_app, jsonify, request

from bitpoker.core.hand import Hand
from bitpoker.core.notation import format_hand, parse_hand
from bitpoker.evaluation.constants import CATEGORY_RANGES, MIN_HAND_SIZE, category_of

score_bp = Blueprint("score", __name__, url_prefix="/api/score")


def _parse_scorable(hand_str) -> Hand:
    """Parse a hand string and check it can be scored.

    Raises:
        ValueError: If the notation is invalid or too few cards are given
    """
    if not isinstance(hand_str, str):
        raise ValueError("Hand must be a string such as 'AC/KC/QC/JC/TC'")

    hand = parse_hand(hand_str)
    if hand.card_count() < MIN_HAND_SIZE:
        raise ValueError(f"A hand needs at least {MIN_HAND_SIZE} cards, got {hand.card_count()}")
    return hand


def _score(hand: Hand) -> dict:
    evaluator = current_app.extensions["bitpoker_evaluator"]
    describer = current_app.extensions["bitpoker_describer"]

    value = evaluator.best_value(hand)
    return {
        "hand": format_hand(hand),
        "value": value,
        "category": category_of(value).name,
        "description": describer.describe_value_detailed(value),
    }


@score_bp.route("/evaluate", methods=["POST"])
def evaluate_hand():
    """Score a single hand.

    Expects JSON: {"hand": "AC/KC/QC/JC/TC"}

    Returns:
        JSON response with the hand value, category and description
    """
    data = request.get_json(silent=True) or {}

    try:
        hand = _parse_scorable(data.get("hand"))
    except ValueError as e:
        return jsonify({"success": False, "error": str(e)}), 400

    result = _score(hand)
    current_app.logger.debug(f"Scored {result['hand']} as {result['value']}")
    return jsonify({"success": True, **result})


@score_bp.route("/compare", methods=["POST"])
def compare_hands():
    """Score several hands and report the winner.

    Expects JSON: {"hands": ["AC/AD/AH/AS/KC", "KC/KD/KH/AC/AD"]}

    Returns:
        JSON response with each hand's score and the index of the winning
        hand, or null when the best hands tie
    """
    data = request.get_json(silent=True) or {}
    hand_strs = data.get("hands")
    max_hands = current_app.config.get("MAX_HANDS_PER_COMPARE", 10)

    if not isinstance(hand_strs, list) or len(hand_strs) < 2:
        return jsonify({"success": False, "error": "Provide at least two hands to compare"}), 400
    if len(hand_strs) > max_hands:
        return jsonify({"success": False, "error": f"At most {max_hands} hands can be compared"}), 400

    try:
        hands = [_parse_scorable(hand_str) for hand_str in hand_strs]
    except ValueError as e:
        return jsonify({"success": False, "error": str(e)}), 400

    results = [_score(hand) for hand in hands]
    best = min(result["value"] for result in results)
    winners = [i for i, result in enumerate(results) if result["value"] == best]

    return jsonify({
        "success": True,
        "results": results,
        "winner": winners[0] if len(winners) == 1 else None,
        "tied": winners if len(winners) > 1 else [],
    })


@score_bp.route("/categories", methods=["GET"])
def list_categories():
    """List hand categories with their value ranges, strongest first."""
    categories = [
        {
            "category": category.name,
            "name": category.display_name,
            "best_value": base,
            "worst_value": base + width - 1,
        }
        for category, (base, width) in CATEGORY_RANGES.items()
    ]
    return jsonify({"success": True, "categories": categories})

"""
REST endpoints for the four KPI cards.

Cards are shared by all users; writing requires a logged in session.
"""

import logging

from flask import Blueprint, jsonify
from flask_login import current_user, login_required

from db_models.databases import db
from db_models.cards import Card, CARD_HEADINGS, MAX_CARDS
from api.errors import APIError, get_json_body

logger = logging.getLogger(__name__)

cards_bp = Blueprint('cards_api', __name__, url_prefix='/api/cards')


def _number(value, field):
    if value is None or value == '':
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise APIError(f'{field} must be a number', 400)


def save_card(heading, current_value, previous_value, description=None, note=None, user_id=None):
    """Create the card for a heading, or update it if it already exists."""
    if heading not in CARD_HEADINGS:
        raise APIError('Invalid heading. Must be one of the 4 fixed options.', 400)

    card = Card.query.filter_by(heading=heading).first()
    if card is None:
        if Card.query.count() >= MAX_CARDS:
            raise APIError('You can only have 4 cards total.', 400)
        card = Card(heading=heading, user_id=user_id)
        db.session.add(card)

    card.apply_values(
        _number(current_value, 'currentValue'),
        _number(previous_value, 'previousValue'),
        description,
        note,
    )
    db.session.commit()
    return card


def update_card(heading, current_value, previous_value, description=None, note=None):
    if not heading:
        raise APIError('Heading is required', 400)
    card = Card.query.filter_by(heading=heading).first()
    if card is None:
        raise APIError('Card not found', 404)
    card.apply_values(
        _number(current_value, 'currentValue'),
        _number(previous_value, 'previousValue'),
        description,
        note,
    )
    db.session.commit()
    return card


def list_cards():
    return Card.query.order_by(Card.created_at.asc(), Card.id.asc()).all()


@cards_bp.route('', methods=['GET'])
@login_required
def get_cards():
    return jsonify([c.to_dict() for c in list_cards()])


@cards_bp.route('', methods=['POST'])
@login_required
def post_card():
    body = get_json_body()
    card = save_card(
        body.get('heading'),
        body.get('currentValue'),
        body.get('previousValue'),
        body.get('description'),
        body.get('note'),
        user_id=current_user.id,
    )
    logger.info("Card saved: %s", card.heading)
    return jsonify({'message': 'Card saved successfully', 'card': card.to_dict()}), 201


@cards_bp.route('', methods=['PUT'])
@login_required
def put_card():
    body = get_json_body()
    card = update_card(
        body.get('heading'),
        body.get('currentValue'),
        body.get('previousValue'),
        body.get('description'),
        body.get('note'),
    )
    logger.info("Card updated: %s", card.heading)
    return jsonify({'message': 'Card updated successfully', 'card': card.to_dict()})

"""
REST endpoints for the daily visitor series shown in the dashboard chart.
"""

import logging
from datetime import date

from flask import Blueprint, jsonify

from db_models.databases import db
from db_models.visitors import Visitor
from api.errors import APIError, get_json_body

logger = logging.getLogger(__name__)

visitors_bp = Blueprint('visitors_api', __name__, url_prefix='/api/visitors')


def _parse_day(value):
    try:
        return date.fromisoformat(str(value)[:10])
    except (TypeError, ValueError):
        raise APIError('Invalid data', 400)


def _parse_count(value):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise APIError('Invalid data', 400)
    if number < 0:
        raise APIError('Invalid data', 400)
    return number


def list_visitors():
    return Visitor.query.order_by(Visitor.date.asc()).all()


def upsert_visitor(day, desktop, mobile):
    """One row per day: an existing day is overwritten."""
    if not day or desktop is None or mobile is None:
        raise APIError('Invalid data', 400)
    day = _parse_day(day)
    desktop = _parse_count(desktop)
    mobile = _parse_count(mobile)

    record = Visitor.query.filter_by(date=day).first()
    if record is None:
        record = Visitor(date=day)
        db.session.add(record)
    record.desktop = desktop
    record.mobile = mobile
    db.session.commit()
    return record


def remove_visitor(visitor_id):
    record = db.session.get(Visitor, visitor_id)
    if record is None:
        raise APIError('Visitor record not found', 404)
    db.session.delete(record)
    db.session.commit()


@visitors_bp.route('', methods=['GET'])
def get_visitors():
    return jsonify([v.to_dict() for v in list_visitors()])


@visitors_bp.route('', methods=['POST'])
def post_visitor():
    body = get_json_body()
    record = upsert_visitor(body.get('date'), body.get('desktop'), body.get('mobile'))
    logger.info("Visitor data saved for %s", record.date)
    return jsonify(record.to_dict()), 201


@visitors_bp.route('/<int:visitor_id>', methods=['DELETE'])
def delete_visitor(visitor_id):
    remove_visitor(visitor_id)
    return jsonify({'success': True})

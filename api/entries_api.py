"""
REST endpoints for table entries.

GET    /api/entries         all entries, newest first
POST   /api/entries         create   {header, type, status?, target, limit, reviewer?}
PUT    /api/entries         update   {id, header?, type?, status?, target, limit, reviewer?}
DELETE /api/entries         delete   {id}
DELETE /api/entries/<id>    delete by path parameter
"""

import logging

from flask import Blueprint, jsonify

from db_models.databases import db
from db_models.entries import TableEntry, ENTRY_STATUSES, STATUS_IN_PROCESS
from api.errors import APIError, get_json_body

logger = logging.getLogger(__name__)

entries_bp = Blueprint('entries_api', __name__, url_prefix='/api/entries')

REQUIRED_FIELDS = ('header', 'type', 'target', 'limit')


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def parse_count(value, field):
    """Parse target/limit: a non-negative integer given as number or numeric string."""
    if isinstance(value, bool):
        raise APIError(f'{field} must be a non-negative integer', 400)
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise APIError(f'{field} must be a non-negative integer', 400)
    if number < 0:
        raise APIError(f'{field} must be a non-negative integer', 400)
    return number


def parse_status(value):
    if _is_blank(value):
        return STATUS_IN_PROCESS
    status = str(value).strip()
    if status not in ENTRY_STATUSES:
        raise APIError(f"status must be one of: {', '.join(ENTRY_STATUSES)}", 400)
    return status


def _clean_reviewer(value):
    if _is_blank(value):
        return None
    return str(value).strip()


def _require_id(body):
    entry_id = body.get('id')
    if _is_blank(entry_id):
        raise APIError('Entry id is required', 400)
    return str(entry_id).strip()


def _get_entry_or_404(entry_id):
    entry = db.session.get(TableEntry, entry_id)
    if entry is None:
        raise APIError('Entry not found', 404)
    return entry


@entries_bp.route('', methods=['GET'])
def list_entries():
    entries = TableEntry.query.order_by(TableEntry.created_at.desc()).all()
    return jsonify([e.to_dict() for e in entries])


@entries_bp.route('', methods=['POST'])
def create_entry():
    body = get_json_body()
    missing = [f for f in REQUIRED_FIELDS if _is_blank(body.get(f))]
    if missing:
        logger.warning("Create entry rejected, missing fields: %s", missing)
        raise APIError('Missing required fields', 400)

    entry = TableEntry(
        header=str(body['header']).strip(),
        type=str(body['type']).strip(),
        status=parse_status(body.get('status')),
        target=parse_count(body['target'], 'target'),
        limit=parse_count(body['limit'], 'limit'),
        reviewer=_clean_reviewer(body.get('reviewer')),
    )
    db.session.add(entry)
    db.session.commit()
    logger.info("Created entry %s", entry.id)
    return jsonify(entry.to_dict()), 201


@entries_bp.route('', methods=['PUT'])
def update_entry():
    body = get_json_body()
    entry = _get_entry_or_404(_require_id(body))

    for field in ('header', 'type'):
        if field in body:
            if _is_blank(body[field]):
                raise APIError(f'{field} cannot be empty', 400)
            setattr(entry, field, str(body[field]).strip())
    if 'status' in body:
        entry.status = parse_status(body['status'])
    for field in ('target', 'limit'):
        if field in body:
            setattr(entry, field, parse_count(body[field], field))
    if 'reviewer' in body:
        entry.reviewer = _clean_reviewer(body['reviewer'])

    db.session.commit()
    logger.info("Updated entry %s", entry.id)
    return jsonify(entry.to_dict())


@entries_bp.route('', methods=['DELETE'])
def delete_entry():
    body = get_json_body()
    entry = _get_entry_or_404(_require_id(body))
    entry_id = entry.id
    db.session.delete(entry)
    db.session.commit()
    logger.info("Deleted entry %s", entry_id)
    return jsonify({'message': 'Entry deleted', 'id': entry_id})


@entries_bp.route('/<entry_id>', methods=['DELETE'])
def delete_entry_by_id(entry_id):
    entry = _get_entry_or_404(entry_id)
    db.session.delete(entry)
    db.session.commit()
    logger.info("Deleted entry %s", entry_id)
    return '', 204

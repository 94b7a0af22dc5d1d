import logging

from flask import Blueprint, request, jsonify, current_app

from shared.pairing import make_groups
from shared.events import pairings_created_event

logger = logging.getLogger(__name__)

bp = Blueprint('pairings', __name__)


class PairingRequestError(ValueError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


def parse_pairing_request(data, default_allow_triple: bool, max_participants: int):
    """
    Validate a pairing request body.

    Returns:
        (participants, allow_triple)

    Raises:
        PairingRequestError: if the body is malformed or too large.
    """
    if not isinstance(data, dict):
        raise PairingRequestError('Request body must be a JSON object')

    participants = data.get('participants')
    if not isinstance(participants, list):
        raise PairingRequestError('participants must be a list')

    for p in participants:
        if not isinstance(p, str) or not p:
            raise PairingRequestError('participants must be non-empty strings')

    if len(participants) > max_participants:
        raise PairingRequestError(
            f'Too many participants: {len(participants)} (max {max_participants})'
        )

    allow_triple = data.get('allow_triple', default_allow_triple)
    if not isinstance(allow_triple, bool):
        raise PairingRequestError('allow_triple must be a boolean')

    return participants, allow_triple


# --- Routes ---

@bp.route('/api/v1/rooms/<room_id>/pairings', methods=['POST'])
def create_pairings(room_id):
    """Randomly group the room's participants for the next round."""
    try:
        participants, allow_triple = parse_pairing_request(
            request.get_json(silent=True),
            current_app.config['ALLOW_TRIPLE'],
            current_app.config['MAX_PARTICIPANTS']
        )
    except PairingRequestError as e:
        logger.warning(f"Rejected pairing request for room {room_id}: {e.reason}")
        return jsonify({'error': e.reason}), 400

    groups = make_groups(participants, allow_triple=allow_triple, rng=current_app.rng)
    event = pairings_created_event(room_id, groups, allow_triple)
    logger.debug(f"Pairings event: {event.to_json()}")

    logger.info(
        f"Room {room_id}: paired {len(participants)} participants into {len(groups)} groups"
    )
    return jsonify(event.to_dict()), 201

from flask import Blueprint, request, jsonify, current_app, abort, make_response, redirect, render_template, url_for
import uuid
from yahtzee import get_registry, get_archive
from yahtzee.services.games import Category, SessionNotFound, mark_category, parse_session_id, roll_dice
from yahtzee.services.games.dice import DICE_COUNT
from yahtzee.socketio_events import notify_game_complete, notify_state_update

main = Blueprint('main', __name__)

_TRUTHY = {'on', 'true', '1', 'yes'}


def _cookie_name():
    return current_app.config.get('GAME_COOKIE_NAME', 'id')


def _cookie_session_id():
    return parse_session_id(request.cookies.get(_cookie_name()))


def _required_session_id():
    session_id = _cookie_session_id()
    if session_id is None:
        abort(404)
    return session_id


def _wants_json():
    return request.accept_mimetypes.best == 'application/json'


def _held_mask():
    data = request.get_json(silent=True)
    if isinstance(data, dict) and isinstance(data.get('held'), list):
        return [bool(h) for h in data['held']]
    return [request.form.get(f'die{i}', '').strip().lower() in _TRUTHY for i in range(1, DICE_COUNT + 1)]


def _live_view(registry, session_id):
    if session_id is None:
        return None
    try:
        with registry.locked(session_id) as game:
            return game.view()
    except SessionNotFound:
        return None


@main.route('/')
def index():
    registry = get_registry()
    session_id = _cookie_session_id()
    view = _live_view(registry, session_id)
    is_new = view is None
    if is_new:
        session_id = str(uuid.uuid4())
        view = registry.get_or_create(session_id).view()
        current_app.logger.info(f"[session-start] id={session_id}")

    if _wants_json():
        resp = make_response(jsonify({'session_id': session_id, **view}))
    else:
        resp = make_response(render_template('index.html', session_id=session_id, **view))
    if is_new:
        resp.set_cookie(_cookie_name(), session_id, httponly=True, samesite='Lax')
    return resp


@main.route('/roll', methods=['POST'])
def roll():
    session_id = _required_session_id()
    if roll_dice(get_registry(), session_id, _held_mask()):
        notify_state_update(session_id)
    return redirect(url_for('main.index'), code=303)


@main.route('/mark/<int:index>', methods=['POST'])
def mark(index):
    session_id = _required_session_id()
    if Category.from_index(index) is None:
        abort(404)
    result = mark_category(get_registry(), get_archive(), session_id, index)
    if result.completed:
        notify_game_complete(session_id, result.scorecard)
        return redirect(url_for('main.scorecard', session_id=session_id), code=303)
    if result.changed:
        notify_state_update(session_id)
    return redirect(url_for('main.index'), code=303)


@main.route('/scorecard/<string:session_id>')
def scorecard(session_id):
    canonical = parse_session_id(session_id)
    if canonical is None:
        abort(404)
    card = get_archive().load(canonical)
    if card is None:
        abort(404)
    return render_template('scorecard.html', session_id=canonical, **card.to_dict())

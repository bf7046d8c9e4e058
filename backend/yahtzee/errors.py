from flask import jsonify, render_template, request
from yahtzee.services.games import ArchiveError, SessionBusy, SessionNotFound


def _error_response(code, message):
    if request.path.startswith('/api/') or request.accept_mimetypes.best == 'application/json':
        return jsonify({'error': message}), code
    return render_template('error.html', errorcode=code, message=message), code


def register_error_handlers(app):
    """404 for unknown games and scorecards, 500 for lock and storage failures."""

    @app.errorhandler(404)
    def not_found(_exc):
        return _error_response(404, 'Not found')

    @app.errorhandler(500)
    def internal_error(_exc):
        return _error_response(500, 'Internal server error')

    @app.errorhandler(SessionNotFound)
    def session_not_found(exc):
        app.logger.info(f"[not-found] {exc}")
        return _error_response(404, 'Game not found')

    @app.errorhandler(SessionBusy)
    def session_busy(exc):
        app.logger.warning(f"[busy] {exc}")
        return _error_response(500, 'Game is busy, try again')

    @app.errorhandler(ArchiveError)
    def archive_failed(exc):
        app.logger.error(f"[archive-error] {exc}")
        return _error_response(500, 'Could not store the scorecard, try again')

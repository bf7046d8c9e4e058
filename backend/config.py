import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///yahtzee.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Cookie carrying the opaque game session id
    GAME_COOKIE_NAME = os.environ.get('GAME_COOKIE_NAME', 'id')
    # Max wait (seconds) for the per-session lock before answering 500
    SESSION_LOCK_TIMEOUT_SEC = float(os.environ.get('SESSION_LOCK_TIMEOUT_SEC', '5'))
    # Comma separated origins allowed to call the JSON API
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173',
        ).split(',') if o.strip()
    ]

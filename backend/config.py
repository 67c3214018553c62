import os


def _csv(value):
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Listening address for `python run.py`
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '5000'))
    # Browser origins allowed to open the socket (comma separated)
    CORS_ALLOWED_ORIGINS = _csv(os.environ.get('CORS_ALLOWED_ORIGINS', 'http://localhost:3000'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Symbols sent with start-game: first arrival, second arrival
    PLAYER_SYMBOLS = tuple(_csv(os.environ.get('PLAYER_SYMBOLS', 'X,O')))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

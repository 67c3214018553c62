from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the xo-relay server!'})

@main.route('/health')
def health():
    stats = current_app.extensions['xo_relay'].stats()
    return jsonify({'status': 'ok', **stats})

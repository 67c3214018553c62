from xo_relay import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Werkzeug dev server is enough for two players per room
    socketio.run(
        app,
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.debug,
        allow_unsafe_werkzeug=True,
    )

import logging
from cohesia import create_app

app = create_app()
logger = logging.getLogger("cohesia")

if __name__ == "__main__":
    port = app.config["PORT"]
    logger.info(f"Server running on http://localhost:{port}")
    logger.info(f"Frontend files served from: {app.config['STATIC_DIR']}")
    logger.info(f"Users data file: {app.config['USERS_FILE']}")
    # threaded=True -> több szál, ezért a tárolók zárolnak
    app.run("0.0.0.0", port, debug=False, threaded=True)

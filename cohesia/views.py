from flask import Blueprint, abort, current_app, send_from_directory
from .guard import PROTECTED_PAGES, is_protected, require_role

views_bp = Blueprint("views", __name__)

def _send_page(filename: str):
    return send_from_directory(current_app.config["STATIC_DIR"], filename)

# Főoldal
@views_bp.get("/")
def index_page():
    return _send_page("index.html")

# Védett oldalak regisztrálása, mindegyik a saját szerepkapujával
def _make_dashboard_view(filename: str, role: str):
    @require_role(role)
    def view():
        return _send_page(filename)
    return view

for _filename, _role in PROTECTED_PAGES:
    views_bp.add_url_rule(
        f"/{_filename}",
        endpoint=_filename.rsplit(".", 1)[0],
        view_func=_make_dashboard_view(_filename, _role),
        methods=["GET"],
    )

# Minden más fájl a publikus könyvtárból, a védett fájlnevek kivételével
@views_bp.get("/<path:filename>")
def static_file(filename: str):
    if is_protected(filename):
        abort(404)
    return send_from_directory(current_app.config["STATIC_DIR"], filename)

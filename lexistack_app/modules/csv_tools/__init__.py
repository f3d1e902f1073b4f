from flask import Blueprint

csv_tools_bp = Blueprint('csv_tools', __name__)

from . import routes  # noqa: E402,F401

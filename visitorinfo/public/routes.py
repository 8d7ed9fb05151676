# visitorinfo/public/routes.py
from flask import Blueprint, render_template

public_bp = Blueprint("public_bp", __name__)


@public_bp.get("/")
def index():
    return render_template("public/index.html")


@public_bp.route("/privacy-policy")
def privacy_policy():
    return render_template("public/privacy_policy.html")

from __future__ import annotations

from flask import Flask

from ..common.guards import form_data, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        form = form_data()
        user = container.auth_service.login(
            form.get("username", ""),
            form.get("password", ""),
            form.get("role", ""),
        )
        return ok({"user": user.public_view()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        return ok()

    @app.route("/me", endpoint="me")
    def me():
        user = container.auth_service.current_user()
        return ok({"user": user.public_view() if user else None})

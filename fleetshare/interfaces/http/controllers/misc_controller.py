# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, jsonify


class MiscController:
    def __init__(self, *, store_kind: str, store_check: Callable[[], object] | None = None) -> None:
        self._store_kind = store_kind
        self._store_check = store_check

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True, "store": self._store_kind}
        if self._store_check is not None:
            try:
                self._store_check()
            except Exception as exc:  # pragma: no cover
                status["ok"] = False
                status["store_error"] = str(exc)
        return jsonify(status), 200 if status["ok"] else 503

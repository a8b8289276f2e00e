# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Article, comment, favorite and tag routes.

The article domain is not implemented; every route answers 501 so clients
can tell a missing feature from a missing route.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, abort, request

from conduit.interfaces.http.auth import authenticated_only
from conduit.shared.logging import logger

_STUB_ROUTES: tuple[tuple[str, str, str], ...] = (
    ("/articles", "GET", "list_articles"),
    ("/articles", "POST", "create_article"),
    ("/articles/<slug>", "GET", "get_article"),
    ("/articles/<slug>", "PUT", "update_article"),
    ("/articles/<slug>", "DELETE", "delete_article"),
    ("/articles/<slug>/comments", "GET", "list_comments"),
    ("/articles/<slug>/comments", "POST", "add_comment"),
    ("/articles/<slug>/comments/<int:comment_id>", "DELETE", "delete_comment"),
    ("/articles/<slug>/favorite", "POST", "favorite_article"),
    ("/articles/<slug>/favorite", "DELETE", "unfavorite_article"),
    ("/tags", "GET", "list_tags"),
)


class ArticlesController:
    def not_implemented(self, **_params: object):
        logger.debug(f"articles: unimplemented {request.method} {request.path}")
        abort(HTTPStatus.NOT_IMPLEMENTED)

    @authenticated_only
    def feed(self):
        return self.not_implemented()

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("articles", __name__, url_prefix="/api")
        bp.add_url_rule("/articles/feed", view_func=self.feed, methods=["GET"])
        for rule, method, endpoint in _STUB_ROUTES:
            bp.add_url_rule(
                rule, view_func=self.not_implemented, methods=[method], endpoint=endpoint
            )
        return bp

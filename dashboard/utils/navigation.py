from typing import NoReturn

from flask import abort, jsonify, redirect


class FlaskNavigator:
    """Navigator that ends the current request with a redirect response."""

    def redirect(self, path: str) -> NoReturn:
        # abort() with a response raises, so callers never resume after this.
        abort(redirect(path))


class JsonNavigator:
    """Navigator for API callers: answers with the target path as JSON."""

    def redirect(self, path: str) -> NoReturn:
        abort(jsonify({"redirect": path}))

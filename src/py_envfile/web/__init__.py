"""Flask integration for py-envfile.

This package copies loaded variables into a Flask application's config.
It is an **optional** extra — install with::

    pip install py-envfile[web]

Call ``init_app`` from your own app factory after loading a ``DotEnv``.
"""

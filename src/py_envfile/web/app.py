"""Copy env file variables into a Flask application's config.

Usage::

    env = DotEnv()
    env.load()
    app = Flask(__name__)
    init_app(app, env, prefix="MYAPP_")

Only values already in the store are copied; the provider fallback is
not consulted, so ``app.config`` reflects exactly what the files said.
"""

from flask import Flask

from py_envfile.env import DotEnv

EXTENSION_KEY = "py_envfile"


def init_app(app: Flask, env: DotEnv, *, prefix: str = "") -> None:
    """Copy loaded variables into ``app.config``.

    Args:
        app: The Flask application to configure.
        env: The store whose entries are copied.
        prefix: Only keys starting with this prefix are copied, and the
            prefix is removed from the config key.

    """
    for key, value in env.items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix) :]
        if name:
            app.config[name] = value
    app.extensions[EXTENSION_KEY] = env

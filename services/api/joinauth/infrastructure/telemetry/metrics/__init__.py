from .on_http_request import requests_metric_middleware, AUTH_PATH, SIGNUP_PATH


def register_middlewares(app):
    '''Metrics middlewares. Counters are no-ops until a meter provider is installed.'''
    app.middleware("http")(requests_metric_middleware)

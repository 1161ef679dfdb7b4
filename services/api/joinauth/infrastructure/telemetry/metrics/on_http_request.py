from opentelemetry import metrics


AUTH_PATH = '/login'
SIGNUP_PATH = '/signUp'

meter = metrics.get_meter("joinauth.metrics")

http_requests_total = meter.create_counter(
    "http_requests_total",
    description="Total HTTP requests by route template and status",
)

auth_logins_total = meter.create_counter(
    "auth_logins_total",
    description="Login attempts by outcome",
)

signups_total = meter.create_counter(
    "signups_total",
    description="Sign up attempts by outcome",
)


def _route_template(request) -> str:
    '''"/users/{user_id}" rather than the concrete url, keeps label cardinality bounded'''
    return getattr(request.scope.get("route"), "path", request.url.path)


async def requests_metric_middleware(request, call_next):
    response = await call_next(request)
    target = _route_template(request)

    http_requests_total.add(1, {
        "http_method": request.method,
        "http_target": target,
        "status_code": str(response.status_code),
    })

    #path -> (counter, status of a successful attempt)
    outcome_counters = {
        AUTH_PATH: (auth_logins_total, 200),
        SIGNUP_PATH: (signups_total, 201),
    }
    if target in outcome_counters:
        counter, success_status = outcome_counters[target]
        counter.add(1, {"status": "success" if response.status_code == success_status else "failure"})

    return response

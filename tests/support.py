"""Action classes used by the tests."""

from aws_lambda_router.actions import Presenter, Resource, RouteActions
from aws_lambda_router.reflector import origin, route, route_not_found


class Shop:
    """Plain class, no hooks."""

    def __init__(self, *construct):
        self.construct = construct

    def index(self, *args):
        return ["index", *args]

    def show(self, id):
        return f"product {id}"

    def move(self, source, target):
        return f"{source}->{target}"

    def construct_args(self):
        return list(self.construct)

    def _secret(self):
        return "secret"


class Users(RouteActions):
    """Hooks with default behavior."""

    def index(self, *args):
        return ["users", *args]

    def show(self, id):
        return f"user {id}"

    def nothing(self):
        return None


class StopBefore(RouteActions):
    """Intercepts every action."""

    ran = False

    def before_action(self, method, arguments):
        return f"stopped {method}"

    def show(self, id):
        StopBefore.ran = True
        return f"user {id}"


class AfterAction(RouteActions):
    """Decorates results."""

    def after_action(self, method, arguments, ran, result):
        return {"method": method, "arguments": arguments, "ran": ran, "result": result}

    def show(self, id):
        return f"user {id}"


class Products(Resource):
    """REST resource."""

    def index(self):
        return "index"

    def create(self):
        return "create"

    def show(self, id):
        return f"show {id}"

    def update(self, id):
        return f"update {id}"

    def replace(self, id):
        return f"replace {id}"

    def delete(self, id):
        return f"delete {id}"


class Pages(Presenter):
    """HTML presenter."""

    def index(self):
        return "index"

    def new(self):
        return "new"

    def create(self):
        return "create"

    def show(self, id):
        return f"show {id}"

    def edit(self, id):
        return f"edit {id}"

    def update(self, id):
        return f"update {id}"

    def remove(self, id):
        return f"remove {id}"

    def delete(self, id):
        return f"delete {id}"


@origin("https://foo.com")
class Base(RouteActions):
    """Reflected base class."""


@origin("https://bar.com")
@origin("https://baz.com")
class Reflected(Base):
    """Reflected routes."""

    @route("GET", "/", name="home")
    def index(self):
        return "home"

    @route(["get", "post"], "/contact", arguments="")
    def contact(self):
        return "contact"

    @route("GET", "/users/{int}", arguments="0", name="users.show")
    @route("GET", "/u/{int}", arguments="0", origins="https://short.com")
    def show(self, id):
        return f"user {id}"

    @route_not_found()
    def missing(self):
        return "missing"

    @route_not_found(origins=["https://short.com"])
    def short_missing(self):
        return "short missing"

    def helper(self):
        return "not a route"


class Accounts(Resource):
    """Resource built with the router, as the Lambda handler does."""

    def __init__(self, router):
        self.response = router.response

    def index(self):
        return [{"id": 1}]

    def create(self):
        self.response.set_status(201)
        return {"created": self.response.request.body}

    def show(self, id):
        return {"id": int(id)}

    def update(self, id):
        return {"updated": int(id)}

    def replace(self, id):
        return {"replaced": int(id)}

    def delete(self, id):
        return b"\x00\x01"

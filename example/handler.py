"""app: handle requests."""

from typing import Any, Dict, List

from aws_lambda_router import StatusCode
from aws_lambda_router.actions import Resource
from aws_lambda_router.proxy import API
from aws_lambda_router.router import Router

USERS: Dict[str, Dict[str, Any]] = {"1": {"id": 1, "name": "Lucas"}}


class Users(Resource):
    """Users API."""

    def __init__(self, router: Router) -> None:
        self.response = router.response

    def index(self) -> List[Dict[str, Any]]:
        return list(USERS.values())

    def create(self) -> Dict[str, Any]:
        self.response.set_status(StatusCode.OK)
        return {"created": True}

    def show(self, id: str) -> Any:
        if id not in USERS:
            self.response.set_status(StatusCode.NOT_FOUND)
            return {"errorMessage": f"User {id} not found"}
        return USERS[id]

    def update(self, id: str) -> Dict[str, Any]:
        return {"updated": id}

    def replace(self, id: str) -> Dict[str, Any]:
        return {"replaced": id}

    def delete(self, id: str) -> Dict[str, Any]:
        USERS.pop(id, None)
        return {"deleted": id}


def routes(router: Router) -> None:
    """Register the application routes."""

    def api(collection):
        collection.get("/", lambda params, router: "Yo", "home")
        collection.get("/hello/{alpha}", lambda params, router: f"Hello, {params[0]}!")
        collection.redirect("/home", "/")
        collection.resource("/users", Users, "users")

    router.serve(None, api, "api")


app = API(
    name="app", register=routes, debug=True, auto_options=True, auto_methods=True
)

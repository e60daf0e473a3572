"""In-memory stand-in for the remote API, served through `httpx.MockTransport`.

Only what the tests need: organizations, workspaces, runs and SSH keys with
server-side ordering and `page[number]` / `page[size]` paging.
"""

from __future__ import annotations

import itertools
import json
import re
from typing import Any, Callable

import httpx

from tfe import Client, ClientSettings

TOKEN = "test-token"
ADDRESS = "https://tfe.test"
CREATED_AT = "2018-07-30T12:00:00.000Z"


def make_client(handler: Callable[[httpx.Request], Any]) -> Client:
    settings = ClientSettings(address=ADDRESS, token=TOKEN)
    return Client(settings, transport=httpx.MockTransport(handler))


def jsonapi_response(status_code: int, document: dict[str, Any] | None = None) -> httpx.Response:
    if document is None:
        return httpx.Response(status_code)
    return httpx.Response(
        status_code,
        content=json.dumps(document).encode("utf-8"),
        headers={"Content-Type": "application/vnd.api+json"},
    )


def error_response(status_code: int, title: str, detail: str | None = None) -> httpx.Response:
    entry: dict[str, Any] = {"status": str(status_code), "title": title}
    if detail:
        entry["detail"] = detail
    return jsonapi_response(status_code, {"errors": [entry]})


class Recorder:
    """Transport double that records every request and answers with `responder`."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder or (lambda request: httpx.Response(204))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    def body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


class FakeTFE:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.organizations: dict[str, dict[str, Any]] = {}
        self.workspaces: dict[str, dict[str, Any]] = {}
        self.runs: dict[str, dict[str, Any]] = {}
        self.ssh_keys: dict[str, dict[str, Any]] = {}
        self._ids = itertools.count(1)

        org = r"organizations/(?P<org>[^/]+)"
        self._routes: list[tuple[str, str, Callable[..., httpx.Response]]] = [
            ("GET", r"organizations", self._list_organizations),
            ("POST", r"organizations", self._create_organization),
            ("GET", org, self._read_organization),
            ("PATCH", org, self._update_organization),
            ("DELETE", org, self._delete_organization),
            ("GET", org + r"/ssh-keys", self._list_ssh_keys),
            ("POST", org + r"/ssh-keys", self._create_ssh_key),
            ("GET", r"ssh-keys/(?P<key_id>[^/]+)", self._read_ssh_key),
            ("PATCH", r"ssh-keys/(?P<key_id>[^/]+)", self._update_ssh_key),
            ("DELETE", r"ssh-keys/(?P<key_id>[^/]+)", self._delete_ssh_key),
            ("GET", org + r"/workspaces", self._list_workspaces),
            ("POST", org + r"/workspaces", self._create_workspace),
            ("GET", org + r"/workspaces/(?P<name>[^/]+)", self._read_workspace),
            ("PATCH", org + r"/workspaces/(?P<name>[^/]+)", self._update_workspace),
            ("DELETE", org + r"/workspaces/(?P<name>[^/]+)", self._delete_workspace),
            ("POST", r"workspaces/(?P<ws_id>[^/]+)/actions/(?P<verb>lock|unlock)", self._lock_workspace),
            ("GET", r"workspaces/(?P<ws_id>[^/]+)/runs", self._list_runs),
            ("POST", r"runs", self._create_run),
            ("GET", r"runs/(?P<run_id>[^/]+)", self._read_run),
            ("POST", r"runs/(?P<run_id>[^/]+)/actions/(?P<verb>apply|cancel|discard)", self._run_action),
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            return error_response(401, "unauthorized")

        path = request.url.path.removeprefix("/api/v2/")
        for method, pattern, handler in self._routes:
            match = re.fullmatch(pattern, path)
            if match and method == request.method:
                return handler(request, **match.groupdict())
        return error_response(404, "not found")

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids):06d}"

    @staticmethod
    def _attributes(request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content)["data"].get("attributes", {})

    @staticmethod
    def _page(request: httpx.Request, items: list[Any]) -> list[Any]:
        number = int(request.url.params.get("page[number]", "1"))
        size = int(request.url.params.get("page[size]", "20"))
        start = (number - 1) * size
        return items[start : start + size]

    # -- organizations ---------------------------------------------------

    def _organization_resource(self, name: str) -> dict[str, Any]:
        org = self.organizations[name]
        return {
            "type": "organizations",
            "id": name,
            "attributes": {
                "name": name,
                "email": org["email"],
                "created-at": CREATED_AT,
                "session-timeout": org.get("session-timeout"),
                "session-remember": org.get("session-remember"),
                "collaborator-auth-policy": org.get("collaborator-auth-policy", "password"),
                "enterprise-plan": "premium",
                "permissions": {"can-update": True, "can-destroy": True},
            },
        }

    def _list_organizations(self, request: httpx.Request) -> httpx.Response:
        names = self._page(request, list(self.organizations))
        return jsonapi_response(200, {"data": [self._organization_resource(n) for n in names]})

    def _create_organization(self, request: httpx.Request) -> httpx.Response:
        attrs = self._attributes(request)
        name = attrs["name"]
        if name in self.organizations:
            return error_response(422, "invalid attribute", "Name has already been taken")
        self.organizations[name] = dict(attrs)
        return jsonapi_response(201, {"data": self._organization_resource(name)})

    def _read_organization(self, request: httpx.Request, org: str) -> httpx.Response:
        if org not in self.organizations:
            return error_response(404, "not found")
        return jsonapi_response(200, {"data": self._organization_resource(org)})

    def _update_organization(self, request: httpx.Request, org: str) -> httpx.Response:
        if org not in self.organizations:
            return error_response(404, "not found")
        attrs = self._attributes(request)
        record = self.organizations.pop(org)
        record.update(attrs)
        name = record.get("name", org)
        self.organizations[name] = record
        return jsonapi_response(200, {"data": self._organization_resource(name)})

    def _delete_organization(self, request: httpx.Request, org: str) -> httpx.Response:
        if self.organizations.pop(org, None) is None:
            return error_response(404, "not found")
        return jsonapi_response(204)

    # -- SSH keys --------------------------------------------------------

    def _ssh_key_resource(self, key_id: str) -> dict[str, Any]:
        return {"type": "ssh-keys", "id": key_id, "attributes": {"name": self.ssh_keys[key_id]["name"]}}

    def _list_ssh_keys(self, request: httpx.Request, org: str) -> httpx.Response:
        if org not in self.organizations:
            return error_response(404, "not found")
        ids = [key_id for key_id, key in self.ssh_keys.items() if key["organization"] == org]
        page = self._page(request, ids)
        return jsonapi_response(200, {"data": [self._ssh_key_resource(key_id) for key_id in page]})

    def _create_ssh_key(self, request: httpx.Request, org: str) -> httpx.Response:
        if org not in self.organizations:
            return error_response(404, "not found")
        attrs = self._attributes(request)
        key_id = self._next_id("sshkey")
        self.ssh_keys[key_id] = {"organization": org, "name": attrs["name"], "value": attrs["value"]}
        return jsonapi_response(201, {"data": self._ssh_key_resource(key_id)})

    def _read_ssh_key(self, request: httpx.Request, key_id: str) -> httpx.Response:
        if key_id not in self.ssh_keys:
            return error_response(404, "not found")
        return jsonapi_response(200, {"data": self._ssh_key_resource(key_id)})

    def _update_ssh_key(self, request: httpx.Request, key_id: str) -> httpx.Response:
        if key_id not in self.ssh_keys:
            return error_response(404, "not found")
        self.ssh_keys[key_id].update(self._attributes(request))
        return jsonapi_response(200, {"data": self._ssh_key_resource(key_id)})

    def _delete_ssh_key(self, request: httpx.Request, key_id: str) -> httpx.Response:
        if self.ssh_keys.pop(key_id, None) is None:
            return error_response(404, "not found")
        return jsonapi_response(204)

    # -- workspaces ------------------------------------------------------

    def _workspace_resource(self, ws_id: str) -> dict[str, Any]:
        ws = self.workspaces[ws_id]
        return {
            "type": "workspaces",
            "id": ws_id,
            "attributes": {
                "name": ws["name"],
                "auto-apply": ws.get("auto-apply", False),
                "locked": ws.get("locked", False),
                "terraform-version": ws.get("terraform-version", "0.11.7"),
                "working-directory": ws.get("working-directory"),
                "created-at": CREATED_AT,
                "actions": {"is-destroyable": True},
                "vcs-repo": None,
            },
            "relationships": {
                "organization": {"data": {"type": "organizations", "id": ws["organization"]}},
            },
        }

    def _find_workspace(self, org: str, name: str) -> str | None:
        for ws_id, ws in self.workspaces.items():
            if ws["organization"] == org and ws["name"] == name:
                return ws_id
        return None

    def _list_workspaces(self, request: httpx.Request, org: str) -> httpx.Response:
        search = request.url.params.get("search[name]")
        ids = [
            ws_id
            for ws_id, ws in self.workspaces.items()
            if ws["organization"] == org and (not search or search in ws["name"])
        ]
        page = self._page(request, ids)
        return jsonapi_response(200, {"data": [self._workspace_resource(ws_id) for ws_id in page]})

    def _create_workspace(self, request: httpx.Request, org: str) -> httpx.Response:
        if org not in self.organizations:
            return error_response(404, "not found")
        attrs = self._attributes(request)
        ws_id = self._next_id("ws")
        self.workspaces[ws_id] = {"organization": org, **attrs}
        return jsonapi_response(201, {"data": self._workspace_resource(ws_id)})

    def _read_workspace(self, request: httpx.Request, org: str, name: str) -> httpx.Response:
        ws_id = self._find_workspace(org, name)
        if ws_id is None:
            return error_response(404, "not found")
        return jsonapi_response(200, {"data": self._workspace_resource(ws_id)})

    def _update_workspace(self, request: httpx.Request, org: str, name: str) -> httpx.Response:
        ws_id = self._find_workspace(org, name)
        if ws_id is None:
            return error_response(404, "not found")
        self.workspaces[ws_id].update(self._attributes(request))
        return jsonapi_response(200, {"data": self._workspace_resource(ws_id)})

    def _delete_workspace(self, request: httpx.Request, org: str, name: str) -> httpx.Response:
        ws_id = self._find_workspace(org, name)
        if ws_id is None:
            return error_response(404, "not found")
        del self.workspaces[ws_id]
        return jsonapi_response(204)

    def _lock_workspace(self, request: httpx.Request, ws_id: str, verb: str) -> httpx.Response:
        if ws_id not in self.workspaces:
            return error_response(404, "not found")
        ws = self.workspaces[ws_id]
        locking = verb == "lock"
        if ws.get("locked", False) == locking:
            return error_response(409, "conflict", f"Workspace is already {verb}ed")
        ws["locked"] = locking
        if locking and request.content:
            ws["lock-reason"] = json.loads(request.content).get("reason")
        return jsonapi_response(200, {"data": self._workspace_resource(ws_id)})

    # -- runs ------------------------------------------------------------

    def _run_resource(self, run_id: str) -> dict[str, Any]:
        run = self.runs[run_id]
        return {
            "type": "runs",
            "id": run_id,
            "attributes": {
                "status": run["status"],
                "message": run.get("message"),
                "is-destroy": run.get("is-destroy", False),
                "has-changes": False,
                "source": "tfe-api",
                "created-at": CREATED_AT,
                "actions": {"is-cancelable": True, "is-confirmable": run["status"] == "planned"},
                "status-timestamps": {"queued-at": CREATED_AT},
            },
            "relationships": {
                "workspace": {"data": {"type": "workspaces", "id": run["workspace"]}},
                "configuration-version": {"data": None},
            },
        }

    def _list_runs(self, request: httpx.Request, ws_id: str) -> httpx.Response:
        if ws_id not in self.workspaces:
            return error_response(404, "not found")
        # Newest first, as the real API does.
        ids = [run_id for run_id, run in reversed(self.runs.items()) if run["workspace"] == ws_id]
        page = self._page(request, ids)
        return jsonapi_response(200, {"data": [self._run_resource(run_id) for run_id in page]})

    def _create_run(self, request: httpx.Request) -> httpx.Response:
        data = json.loads(request.content)["data"]
        ws_id = data["relationships"]["workspace"]["data"]["id"]
        if ws_id not in self.workspaces:
            return error_response(404, "not found")
        attrs = data.get("attributes", {})
        run_id = self._next_id("run")
        self.runs[run_id] = {"workspace": ws_id, "status": "pending", **attrs}
        return jsonapi_response(201, {"data": self._run_resource(run_id)})

    def _read_run(self, request: httpx.Request, run_id: str) -> httpx.Response:
        if run_id not in self.runs:
            return error_response(404, "not found")
        ws_id = self.runs[run_id]["workspace"]
        document = {"data": self._run_resource(run_id)}
        if ws_id in self.workspaces:
            document["included"] = [self._workspace_resource(ws_id)]
        return jsonapi_response(200, document)

    def _run_action(self, request: httpx.Request, run_id: str, verb: str) -> httpx.Response:
        if run_id not in self.runs:
            return error_response(404, "not found")
        run = self.runs[run_id]
        if verb == "apply" and run["status"] != "planned":
            return error_response(409, "transition not allowed", "Run is not confirmable")
        run["status"] = {"apply": "confirmed", "cancel": "canceled", "discard": "discarded"}[verb]
        run["comment"] = json.loads(request.content).get("comment") if request.content else None
        return jsonapi_response(202)

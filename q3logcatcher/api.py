"""Poll a Docker container's logs through the Docker Engine API on a unix socket."""

from __future__ import annotations

import http.client
import json
import logging
import os
import socket
import time
from dataclasses import dataclass, field

from q3logcatcher.catcher import Catcher

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0


class DockerApiError(Exception):
    """Raised when the Docker API cannot be queried."""


@dataclass
class Container:
    """A container as listed by the Docker API."""

    id: str
    names: list[str] = field(default_factory=list)


class _UnixHTTPConnection(http.client.HTTPConnection):
    def __init__(self, socket_path: str) -> None:
        super().__init__("localhost", timeout=REQUEST_TIMEOUT)
        self._socket_path = socket_path

    def connect(self) -> None:
        self.sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self.sock.settimeout(self.timeout)
        self.sock.connect(self._socket_path)


class DockerClient:
    """Repeatedly fetches new log output of one container and feeds it to a catcher."""

    def __init__(self, socket_path: str | os.PathLike[str], container: str, interval: float) -> None:
        if not os.path.lexists(socket_path):
            raise FileNotFoundError(f"socket {socket_path} does not exist")
        self.socket_path = os.fspath(socket_path)
        self.container_name = f"/{container}"
        self.interval = interval
        self.since = 0

    def _get(self, path: str, context: str) -> bytes:
        conn = _UnixHTTPConnection(self.socket_path)
        try:
            conn.request("GET", path)
            return conn.getresponse().read()
        except (OSError, http.client.HTTPException) as exc:
            raise DockerApiError(f"{context}: {exc}") from exc
        finally:
            conn.close()

    def find_container(self) -> Container | None:
        """Return the running container with the configured name, or None."""
        body = self._get("/containers/json", "api.find_container: can not get list of containers")
        try:
            items = json.loads(body) or []
            for item in items:
                names = item.get("Names") or []
                if names and names[0] == self.container_name:
                    return Container(id=item.get("Id") or "", names=list(names))
        except (ValueError, TypeError, AttributeError) as exc:
            raise DockerApiError(f"api.find_container: can not unmarshal response body: {exc}") from exc
        return None

    def fetch_logs(self, container_id: str) -> bytes:
        """Return the container's output since the previous fetch."""
        path = f"/containers/{container_id}/logs?stdout=1&stderr=1&since={self.since}"
        logs = self._get(path, f"api.fetch_logs: can not get logs for container {container_id}")
        self.since = int(time.time())
        return logs

    def poll_once(self, catcher: Catcher) -> bool:
        """Fetch and process new logs once; return False if the container is missing."""
        container = self.find_container()
        if container is None or not container.id:
            logger.warning("api.run: container %s does not exist", self.container_name)
            return False
        catcher.process(self.fetch_logs(container.id))
        return True

    def run(self, catcher: Catcher) -> None:
        """Poll forever, waiting the configured interval between polls."""
        while True:
            self.poll_once(catcher)
            time.sleep(self.interval)
# q3logcatcher

Reads Quake 3 server console output, picks out the kills of each match and
stores every finished match as one document in the MongoDB collection `logs`.

A match begins at a `Game_Start:` line and ends at an `Exit:` line. Each
`<killer> killed <victim>` line in between is recorded (names are runs of
letters, matched without regard to case). Suicides, where killer and victim
are the same, are ignored, and a match that ends with no kills is not stored.
Kill lines seen outside a match are ignored.

## Install

```
pip install .
```

## Usage

Parse a log file once:

```
q3logcatcher --dbconn mongodb://localhost:27017 --path /path/to/qconsole.log
```

Follow a running server through the Docker Engine unix socket, polling the
container's output every interval:

```
q3logcatcher --dbconn mongodb://localhost:27017 \
    --path /var/run/docker.sock --socket \
    --container quake3-server --interval 10s
```

The command first prints `Revision: unknown`. In socket mode it runs until
interrupted or until an error occurs; a container that is not running is
reported as a warning and polled again after the interval. On failure it
prints `[ERROR] <stage>: <message>` to standard error and exits with status 1.

Options:

| Option        | Meaning                                                 | Default         |
|---------------|---------------------------------------------------------|-----------------|
| `--dbconn`    | MongoDB connection string (required)                    |                 |
| `--dbname`    | Database name                                           | `quake3`        |
| `--path`      | Log file, or Docker socket with `--socket` (required)   |                 |
| `--socket`    | Read from the Docker socket instead of a file           | off             |
| `--container` | Container name to follow                                | `quake3-server` |
| `--interval`  | Polling interval, e.g. `10s`, `1m30s`, `250ms`          | `10s`           |

Intervals accept the units `ns`, `us`, `ms`, `s`, `m` and `h`, combined and
with fractions (`1.5h`, `1h30m`), or a bare `0`.

## Stored documents

```
{"kills": [{"killer": "JavaScripter", "victim": "twist"}, ...], "date": <match start, UTC>}
```

## Library use

```python
from q3logcatcher.catcher import Catcher
from q3logcatcher.logfile import LogfileClient

catcher = Catcher.connect("mongodb://localhost:27017", "quake3")
LogfileClient("qconsole.log").run(catcher)
```

- `q3logcatcher.catcher`: `is_new_game(line)`, `is_end_game(line)` and
  `parse_kill(line)` (returns a `Kill` or `None`); `Gamelog.to_document()`;
  `Catcher(collection)` takes any object with an `insert_one` method, and
  `Catcher.process(data)` accepts bytes or text, keeping match state between
  calls so logs can be fed in pieces. Lines of 64 KiB or more, and failed
  inserts, raise `CatcherError`.
- `q3logcatcher.logfile`: `LogfileClient(path)` raises `FileNotFoundError`
  for a missing path; `run(catcher)` processes the whole file.
- `q3logcatcher.api`: `DockerClient(socket_path, container, interval)` with
  `find_container()`, `fetch_logs(container_id)` (only output since the
  previous fetch), `poll_once(catcher)` and `run(catcher)`. Request and
  response failures raise `DockerApiError`.
- `q3logcatcher.cli`: `main(argv=None)`, `build_parser()` and
  `parse_duration(text)`.

## What it does not do

It only writes matches; it has no way to query, summarise or report on the
stored documents. The Docker connection is only over a local unix socket, not
over TCP.
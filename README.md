# sentinel

A Python library that drives a chain of external scanners against in-scope
targets. It keeps project settings in a YAML file and records discovered
subdomains in an SQLite database per workspace.

## Installation

```
pip install .
```

The reconnaissance pipeline calls these tools, which must be on your `PATH`:
`subfinder`, `dnsx`, `naabu`, `httpx` and `nuclei`.

Only scan systems you are authorised to test.

## Modules

### `sentinel.config`

`Config` is a dataclass with `workspace`, `targets`, `exclude`, `api_keys`
(an `ApiKeys` with `github`) and `recon` (a `ReconSettings` with `threads`).

- `create_default_config(path="config.yaml")` writes a starter file and returns it.
- `load_config(path="config.yaml")` reads a file. It raises `FileNotFoundError` if
  the file is missing and `ValueError` if the YAML or a field is malformed.
- `save_config(cfg, path="config.yaml")` writes a configuration back.
- `Config.to_dict()` and `Config.from_dict(data)` convert to and from plain data.
  `exclude` and `api_keys` are left out of the output when they are empty.

The default file looks like this:

```yaml
workspace: my-first-project
targets:
- example.com
exclude:
- docs.example.com
recon:
  threads: 50
```

### `sentinel.database`

`init_db(workspace, base_dir="bugbounty-results")` creates
`<base_dir>/<workspace>/sentinel.db` along with its directory. It creates the
tables `targets`, `subdomains`, `ips`, `ports` and `urls` if they are missing. It
returns an `sqlite3.Connection` in autocommit mode. `create_tables(conn)` applies
the schema to an existing connection.

### `sentinel.recon`

`run_reconnaissance(cfg, db)` calls `run_for_target(target, cfg, db)` for each
target. For one target, `run_for_target`:

1. Records the target in the `targets` table (`target_id(db, target)`).
2. Enumerates subdomains with `subfinder` (`run_subfinder(target)`). It stores them
   with `save_subdomains(db, target_id, subdomains)`, which returns how many were new.
3. Writes them to `bugbounty-results/<workspace>/<target>/dns/subdomains.txt`. It
   then resolves them with `dnsx` into `.../dns/resolved.txt` (`run_dnsx`).
4. Scans ports with `naabu` into `.../ports/ports.txt` (`run_naabu`).
5. Probes web servers with `httpx` into `.../web/webservers.txt` (`run_httpx`).
6. Groups URLs by the technologies `httpx` reported (`parse_httpx_output`). It then
   runs one `nuclei` scan per technology and appends the findings to
   `.../vulnerabilities/nuclei_findings.txt` (`run_contextual_nuclei_scans`).

Result files always go under `bugbounty-results` in the current directory,
whatever `base_dir` was given to `init_db`. If the target cannot be recorded or
`subfinder` fails, an error is printed and that target is skipped. Failures of the
later tools are printed and the pipeline carries on.

`parse_httpx_output(path)` maps each lower-cased technology to the URLs that use
it. The technology list is the second bracketed field of a line, and the URL is
the line's first word.

### `sentinel.commands`

- `run_command(name, *args)` runs a tool with its output passed straight through.
- `run_command_and_capture(name, *args)` returns the tool's standard output and
  discards its standard error.

Both raise `CommandError`, which has `command`, `returncode` and `reason`, when
the tool cannot be started or exits with a non-zero status.

### `sentinel.log`

`info`, `warn`, `error(message, err=None)` and `success` print coloured,
timestamped lines (`[INFO][HH:MM:SS] ...`). `critical(message, err)` prints to
standard error and exits with status 1.

## Example

```python
from sentinel.config import load_config
from sentinel.database import init_db
from sentinel.recon import parse_httpx_output, run_reconnaissance

cfg = load_config("config.yaml")
db = init_db(cfg.workspace)
run_reconnaissance(cfg, db)

print(parse_httpx_output("bugbounty-results/my-first-project/example.com/web/webservers.txt"))
```

## What it does not do

- There is no interactive shell and no console command. You drive the pipeline
  from Python as shown above.
- `recon.threads`, `exclude` and `api_keys` are stored and loaded, but the
  pipeline does not use them.
- The `ips`, `ports` and `urls` tables are created, but nothing fills them. Those
  results exist only in the text files the tools write.
"""Reconnaissance workflow: subdomains, DNS, open ports, web servers, then targeted scans."""

from __future__ import annotations

import os
import re
import sqlite3
import tempfile
from collections.abc import Iterable
from pathlib import Path

from sentinel import log
from sentinel.commands import CommandError, run_command, run_command_and_capture
from sentinel.config import Config
from sentinel.database import DB_DIR

_BRACKETED = re.compile(r"\[(.*?)\]")


def run_reconnaissance(cfg: Config, db: sqlite3.Connection) -> None:
    """Run the full workflow for every target in the configuration."""
    for target in cfg.targets:
        run_for_target(target, cfg, db)


def target_id(db: sqlite3.Connection, target: str) -> int:
    """Return the id of a target, recording it first if it is new."""
    db.execute("INSERT OR IGNORE INTO targets(name) VALUES(?)", (target,))
    row = db.execute("SELECT id FROM targets WHERE name = ?", (target,)).fetchone()
    return row[0]


def save_subdomains(db: sqlite3.Connection, target_id: int, subdomains: Iterable[str]) -> int:
    """Store subdomains for a target, ignoring ones already known; return how many were new."""
    added = 0
    for sub in subdomains:
        try:
            cursor = db.execute(
                "INSERT OR IGNORE INTO subdomains(target_id, subdomain) VALUES(?, ?)",
                (target_id, sub),
            )
        except sqlite3.Error as exc:
            log.warn(f"Failed to insert subdomain {sub}: {exc}")
            continue
        added += cursor.rowcount
    return added


def run_for_target(target: str, cfg: Config, db: sqlite3.Connection) -> None:
    """Run every reconnaissance phase for one target, writing results under its workspace."""
    log.info(f"Starting reconnaissance for: {target}")

    try:
        tid = target_id(db, target)
    except sqlite3.Error as exc:
        log.error("Could not get target ID from database", exc)
        return

    log.info("Phase 1: Subdomain Enumeration for " + target)
    try:
        subdomains = run_subfinder(target)
    except CommandError as exc:
        log.error("Subfinder execution failed", exc)
        return
    save_subdomains(db, tid, subdomains)
    log.success(f"Found and saved {len(subdomains)} subdomains for {target}")

    result_dir = Path(DB_DIR) / cfg.workspace / target

    dns_dir = result_dir / "dns"
    dns_dir.mkdir(parents=True, exist_ok=True)
    subdomains_file = dns_dir / "subdomains.txt"
    subdomains_file.write_text("".join(f"{sub}\n" for sub in subdomains), encoding="utf-8")
    resolved_file = dns_dir / "resolved.txt"
    run_dnsx(subdomains_file, resolved_file)

    ports_dir = result_dir / "ports"
    ports_dir.mkdir(parents=True, exist_ok=True)
    ports_file = ports_dir / "ports.txt"
    run_naabu(resolved_file, ports_file)

    web_dir = result_dir / "web"
    web_dir.mkdir(parents=True, exist_ok=True)
    webservers_file = web_dir / "webservers.txt"
    run_httpx(ports_file, webservers_file)

    run_contextual_nuclei_scans(webservers_file, result_dir)

    log.success(f"Reconnaissance complete for: {target}")


def run_subfinder(target: str) -> list[str]:
    """Enumerate subdomains of a target passively; raises CommandError on failure."""
    log.info("Running passive subdomain enumeration with Subfinder...")
    output = run_command_and_capture("subfinder", "-d", target, "-silent")
    return output.strip().split("\n")


def _run_logged(failure: str, command_name: str, *args: str) -> None:
    try:
        run_command(command_name, *args)
    except CommandError as exc:
        log.error(failure, exc)


def run_dnsx(input_file: str | os.PathLike, output_file: str | os.PathLike) -> None:
    """Resolve the hosts listed in a file to IP addresses."""
    log.info("Resolving subdomains to IP addresses with Dnsx...")
    _run_logged(
        "Error running dnsx",
        "dnsx", "-l", os.fspath(input_file), "-resp-only", "-o", os.fspath(output_file), "-silent",
    )


def run_naabu(input_file: str | os.PathLike, output_file: str | os.PathLike) -> None:
    """Scan the addresses listed in a file for open ports."""
    log.info("Scanning for open ports with Naabu...")
    _run_logged(
        "Error running naabu",
        "naabu", "-l", os.fspath(input_file), "-o", os.fspath(output_file), "-silent",
    )


def run_httpx(input_file: str | os.PathLike, output_file: str | os.PathLike) -> None:
    """Probe the listed host:port pairs for web servers and their technologies."""
    log.info("Identifying live web servers with Httpx...")
    _run_logged(
        "Error running httpx",
        "httpx", "-l", os.fspath(input_file), "-tech-detect", "-status-code", "-title",
        "-o", os.fspath(output_file), "-silent",
    )


def run_contextual_nuclei_scans(
    httpx_file: str | os.PathLike, target_result_dir: str | os.PathLike
) -> None:
    """Run one Nuclei scan per detected technology, against the URLs that use it."""
    log.info("Starting context-aware vulnerability scanning with Nuclei...")
    try:
        tech_to_urls = parse_httpx_output(httpx_file)
    except OSError as exc:
        log.error("Error parsing httpx output", exc)
        return

    if not tech_to_urls:
        log.warn("No technologies detected from httpx output. Skipping targeted Nuclei scans.")
        return

    nuclei_dir = Path(target_result_dir) / "vulnerabilities"
    nuclei_dir.mkdir(parents=True, exist_ok=True)
    findings_file = nuclei_dir / "nuclei_findings.txt"

    for tech, urls in tech_to_urls.items():
        log.info(f"Found {len(urls)} URLs with technology: {tech}. Running targeted scan.")
        try:
            with tempfile.NamedTemporaryFile(
                "w", prefix="nuclei-targets-", suffix=".txt", delete=False, encoding="utf-8"
            ) as handle:
                handle.writelines(f"{url}\n" for url in urls)
                targets_path = handle.name
        except OSError as exc:
            log.error(f"Failed to create temp file for {tech}", exc)
            continue
        try:
            _run_logged(
                f"Error running nuclei for tech {tech}",
                "nuclei", "-l", targets_path, "-t", "technologies", "-tags", tech,
                "-o", os.fspath(findings_file), "-silent",
            )
        finally:
            os.remove(targets_path)


def parse_httpx_output(httpx_file: str | os.PathLike) -> dict[str, list[str]]:
    """Map each lower-cased technology in an httpx result file to the URLs that use it.

    The technology list is the second bracketed field of a line; the URL is its first word.
    """
    tech_to_urls: dict[str, list[str]] = {}
    with open(httpx_file, encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            parts = line.split(" ")
            if len(parts) < 2:
                continue
            url = parts[0]
            fields = _BRACKETED.findall(line)
            if len(fields) < 2:
                continue
            for tech in fields[1].split(","):
                name = tech.strip().lower()
                if name:
                    tech_to_urls.setdefault(name, []).append(url)
    return tech_to_urls
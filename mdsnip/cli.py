from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, List

from .config import ConfigError
from .engine import Engine
from .errors import SnipUserError
from .importer import ImportOptions
from .reader import ENCODING_ERRORS, LocalFileReader
from .snippet import extract_snippet
from .version import tool_version


def _jdumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def _write_document(text: str) -> None:
    # document text may carry undecodable bytes as surrogates; emit them unchanged
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8", ENCODING_ERRORS))
    sys.stdout.buffer.flush()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if (verbose or os.environ.get("MDSNIP_DEBUG")) else logging.INFO
    log = logging.getLogger("mdsnip")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mdsnip",
        description="Import file snippets into Markdown code blocks",
        add_help=True,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for document commands
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--root", type=Path, default=None, help="project root (default: current directory)")
        sp.add_argument("--base-dir", type=Path, default=None, help="resolve file= references against this directory")
        sp.add_argument(
            "--ignore-missing",
            action="store_true",
            default=None,
            help="substitute a notice instead of failing on missing referenced files",
        )
        sp.add_argument("--async", dest="use_async", action="store_true", default=None,
                        help="read referenced files concurrently")
        sp.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sp_render = sub.add_parser("render", help="print the document with imported snippets")
    sp_render.add_argument("document", type=Path)
    add_common(sp_render)

    sp_update = sub.add_parser("update", help="rewrite documents in place")
    sp_update.add_argument("paths", nargs="*", type=Path)
    sp_update.add_argument("--check", action="store_true", help="write nothing, exit 1 if anything is outdated")
    add_common(sp_update)

    sp_deps = sub.add_parser("deps", help="list referenced files (JSON)")
    sp_deps.add_argument("paths", nargs="*", type=Path)
    add_common(sp_deps)

    sp_report = sub.add_parser("report", help="JSON report of an import run")
    sp_report.add_argument("paths", nargs="*", type=Path)
    add_common(sp_report)

    sp_extract = sub.add_parser("extract", help="print one snippet of a file")
    sp_extract.add_argument("file", type=Path)
    sp_extract.add_argument("--start", default=None, help="start marker (excluded)")
    sp_extract.add_argument("--end", default=None, help="end marker (included, then dropped with the last line)")
    sp_extract.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    return p


def _engine(ns: argparse.Namespace) -> Engine:
    root = (ns.root or Path.cwd()).resolve()
    engine = Engine(root)
    # CLI flags take precedence over mdsnip.yaml
    overrides: dict = {}
    if ns.base_dir is not None:
        overrides["base_dir"] = ns.base_dir.resolve()
    if ns.ignore_missing is not None:
        overrides["ignore_missing_files"] = ns.ignore_missing
    if ns.use_async is not None:
        overrides["use_async"] = ns.use_async
    if overrides:
        options: ImportOptions = replace(engine.options, **overrides)
        engine = Engine(root, options=options, config=engine.config)
    return engine


def _paths(ns: argparse.Namespace) -> List[Path]:
    return [p.resolve() for p in getattr(ns, "paths", [])]


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(getattr(ns, "verbose", False)))

    try:
        if ns.cmd == "extract":
            content = LocalFileReader().read_text(ns.file)
            _write_document(extract_snippet(content, ns.start, ns.end, source=str(ns.file)) + "\n")
            return 0

        engine = _engine(ns)

        if ns.cmd == "render":
            result = engine.process(ns.document.resolve(), write=False)
            _write_document(result.text)
            return 0

        if ns.cmd == "update":
            docs = engine.collect_documents(_paths(ns))
            report = engine.run(docs, write=not ns.check)
            if ns.check:
                for path in report.changed:
                    sys.stderr.write(f"outdated: {path}\n")
                return 1 if report.changed else 0
            return 0

        if ns.cmd == "deps":
            report = engine.run(engine.collect_documents(_paths(ns)), write=False)
            sys.stdout.write(_jdumps(report.referenced_files))
            return 0

        if ns.cmd == "report":
            report = engine.run(engine.collect_documents(_paths(ns)), write=False)
            sys.stdout.write(_jdumps(report.model_dump(mode="json")))
            return 0

    except (SnipUserError, ConfigError) as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except FileNotFoundError as e:
        sys.stderr.write(f"File not found: {e.filename or e}\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import yaml

from tclens import __version__
from tclens.analyze.dispatch import analyze_snippet
from tclens.config.loader import CONFIG_FILENAME, load_config
from tclens.config.schema import OUTPUT_FORMATS, TclensConfig
from tclens.config.templates import DEFAULT_CONFIG
from tclens.config.validate import validate_config_paths
from tclens.errors import AnalysisError
from tclens.report.build import build_report
from tclens.report.format_json import report_from_dict, to_json, write_json
from tclens.report.format_md import to_markdown
from tclens.report.last_session import Draft, LastSession, load_session, save_session
from tclens.report.models import AnalysisReport
from tclens.samples import DEFAULT_SAMPLE_FUNCTION, sample_for
from tclens.util.languages import AUTO, SUPPORTED_LANGUAGES, language_for_path
from tclens.util.logging import setup_logging

log = logging.getLogger(__name__)

_LANGUAGE_CHOICES = [AUTO, *SUPPORTED_LANGUAGES]


def _config_paths(args: argparse.Namespace) -> list[Path] | None:
    if not getattr(args, "config", None):
        return None
    return [Path(p) for p in args.config]


def _load_cli_config(args: argparse.Namespace) -> TclensConfig:
    return load_config(Path.cwd(), _config_paths(args))


def _state_path(args: argparse.Namespace, cfg: TclensConfig) -> Path:
    path = Path(args.state) if getattr(args, "state", None) else Path(cfg.state_path)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def _read_source(path_arg: str | None) -> tuple[str, Path | None]:
    if not path_arg or path_arg == "-":
        return sys.stdin.read(), None
    path = Path(path_arg)
    return path.read_text(encoding="utf-8"), path


def _render(report: AnalysisReport, fmt: str, cfg: TclensConfig) -> str:
    if fmt == "json":
        return to_json(report)
    return to_markdown(report, show_observations=cfg.show_observations)


def cmd_analyze(args: argparse.Namespace) -> int:
    cfg = _load_cli_config(args)
    try:
        src, path = _read_source(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Failed to read %s (%s)", args.path, exc)
        return 1

    language = args.language
    if not language and path is not None:
        language = language_for_path(path)
    if not language:
        language = cfg.language
    function_name = args.function if args.function is not None else cfg.function_name

    try:
        analysis = analyze_snippet(src, language, function_name)
    except AnalysisError as exc:
        log.error("%s", exc)
        return 2

    report = build_report(analysis)
    print(_render(report, args.format or cfg.format, cfg))

    if args.json_path:
        write_json(report, Path(args.json_path))
        log.info("Wrote JSON report to %s", args.json_path)

    if cfg.save_last and not args.no_save:
        state = _state_path(args, cfg)
        draft = Draft(code=src, function_name=analysis.function_name, language=language or AUTO)
        save_session(state, LastSession(draft=draft, result=report.to_dict()))
        log.debug("Saved last session to %s", state)
    return 0


def cmd_last(args: argparse.Namespace) -> int:
    cfg = _load_cli_config(args)
    state = _state_path(args, cfg)
    session = load_session(state)
    if session is None or session.result is None:
        log.error("No saved analysis in %s. Run `tclens analyze` first.", state)
        return 1
    report = report_from_dict(session.result)
    print(_render(report, args.format or cfg.format, cfg))
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    try:
        print(sample_for(args.language))
    except KeyError as exc:
        log.error("%s", exc.args[0])
        return 1
    log.info("Analyze it with: tclens analyze - -f %s", DEFAULT_SAMPLE_FUNCTION)
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    target = Path(args.output) if args.output else Path.cwd() / CONFIG_FILENAME
    if target.exists() and not args.force:
        log.error("Config %s already exists. Use --force to overwrite.", target)
        return 1
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG, encoding="utf-8")
    log.info("Wrote config to %s", target)
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    cfg = _load_cli_config(args)
    print(yaml.safe_dump(dataclasses.asdict(cfg), sort_keys=False))
    return 0


def cmd_config_validate(args: argparse.Namespace) -> int:
    config_paths = _config_paths(args) or [Path.cwd() / CONFIG_FILENAME]
    if not args.config and not config_paths[0].exists():
        log.error("Config %s not found.", config_paths[0])
        return 1
    errors = validate_config_paths(config_paths)
    if errors:
        for err in errors:
            log.error("%s", err)
        return 1
    log.info("Config valid.")
    return 0


def _add_config_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        action="append",
        default=None,
        help="Config file path (repeatable; later files override earlier ones)",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tclens", description="tclens: heuristic time complexity of code snippets")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    sub = p.add_subparsers(dest="cmd", required=True)

    a = sub.add_parser("analyze", help="Analyze a snippet file (or stdin)")
    a.add_argument("path", nargs="?", default=None, help="Snippet file, or - for stdin (default: stdin)")
    a.add_argument("-l", "--language", choices=_LANGUAGE_CHOICES, default=None, help="Snippet language")
    a.add_argument("-f", "--function", default=None, help="Function name used to detect recursion")
    a.add_argument("--format", choices=sorted(OUTPUT_FORMATS), default=None, help="Output format")
    a.add_argument("--json", dest="json_path", default=None, help="Also write the JSON report to path")
    a.add_argument("--state", default=None, help="Last-session file (default from config)")
    a.add_argument("--no-save", action="store_true", help="Do not persist this run as the last session")
    _add_config_arg(a)
    a.set_defaults(func=cmd_analyze)

    last = sub.add_parser("last", help="Show the last saved analysis")
    last.add_argument("--format", choices=sorted(OUTPUT_FORMATS), default=None, help="Output format")
    last.add_argument("--state", default=None, help="Last-session file (default from config)")
    _add_config_arg(last)
    last.set_defaults(func=cmd_last)

    s = sub.add_parser("sample", help="Print a sample snippet")
    s.add_argument("-l", "--language", choices=_LANGUAGE_CHOICES, default=AUTO, help="Sample language")
    s.set_defaults(func=cmd_sample)

    i = sub.add_parser("init", help="Create a tclens configuration file")
    i.add_argument("--output", default=None, help=f"Config path (default: ./{CONFIG_FILENAME})")
    i.add_argument("--force", action="store_true", help="Overwrite an existing config")
    i.set_defaults(func=cmd_init)

    c = sub.add_parser("config", help="Config utilities")
    c_sub = c.add_subparsers(dest="config_cmd", required=True)
    c_show = c_sub.add_parser("show", help="Show merged config")
    _add_config_arg(c_show)
    c_show.set_defaults(func=cmd_config_show)
    c_validate = c_sub.add_parser("validate", help="Validate config file(s)")
    _add_config_arg(c_validate)
    c_validate.set_defaults(func=cmd_config_validate)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(bool(args.verbose))
    return int(args.func(args))

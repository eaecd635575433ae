"""
CLI entry point. Usage: hone <command> [args]
Runs the same commands the editor UI invokes; results are printed as JSON.
"""
import argparse
import json
import os
import sys

from hone.api.commands import CommandResult, Commands
from hone.config import load_config
from hone.core.config import ENV_LOG_LEVEL
from hone.core.context import AppContext
from hone.utils.logger import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hone", description="HONE editor backend commands")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML config (default: hone/config/default.yaml + HONE_CONFIG)")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory for recent_files.json and session.json (default: HONE_DATA_DIR, config data_dir, ~/.hone)")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (default: config or HONE_LOG_LEVEL)")
    parser.add_argument("--log-dir", type=str, default=None, help="Directory for hone.log (default: HONE_LOG_DIR or console only)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    read_parser = subparsers.add_parser("read", help="Print a file's contents")
    read_parser.add_argument("path", type=str)

    write_parser = subparsers.add_parser("write", help="Overwrite a file with --content or stdin")
    write_parser.add_argument("path", type=str)
    write_parser.add_argument("--content", type=str, default=None, help="Text to write (default: read stdin)")

    dir_parser = subparsers.add_parser("dir", help="Print a path's parent directory")
    dir_parser.add_argument("path", type=str)

    recent_parser = subparsers.add_parser("recent", help="Recent files")
    recent_sub = recent_parser.add_subparsers(dest="action", required=True)
    recent_sub.add_parser("list", help="List recent files (prunes missing ones)")
    recent_add = recent_sub.add_parser("add", help="Add an existing file to the recent list")
    recent_add.add_argument("path", type=str)

    session_parser = subparsers.add_parser("session", help="Editing session")
    session_sub = session_parser.add_subparsers(dest="action", required=True)
    session_sub.add_parser("show", help="Show the restorable session")
    session_save = session_sub.add_parser("save", help="Replace the session")
    session_save.add_argument("open_files", nargs="*", type=str)
    session_save.add_argument("--active", type=str, default=None, help="Active file")
    return parser


def _dispatch(commands: Commands, args) -> CommandResult:
    if args.command == "read":
        return commands.invoke("read_file", path=args.path)
    if args.command == "write":
        content = args.content if args.content is not None else sys.stdin.read()
        return commands.invoke("write_file", path=args.path, content=content)
    if args.command == "dir":
        return commands.invoke("get_file_dir", path=args.path)
    if args.command == "recent":
        if args.action == "add":
            return commands.invoke("add_recent_file", path=args.path)
        return commands.invoke("get_recent_files")
    if args.command == "session":
        if args.action == "save":
            return commands.invoke("save_session", open_files=args.open_files, active_file=args.active)
        return commands.invoke("get_session")
    return commands.invoke(args.command)


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = load_config(override_path=args.config)
    log_config = config.get("logging") or {}

    # --log-level, then HONE_LOG_LEVEL, then config
    level_name = args.log_level
    if level_name is None and not os.environ.get(ENV_LOG_LEVEL):
        level_name = log_config.get("level")
    configure_logging(level=level_name, log_dir=args.log_dir or log_config.get("dir"))

    if args.data_dir:
        context = AppContext.for_directory(args.data_dir)
    else:
        context = AppContext()
    result = _dispatch(Commands(context), args)

    if not result.ok:
        print("ERROR: %s" % result.error, file=sys.stderr)
        return 1
    if args.command == "read":
        sys.stdout.write(result.value)
    elif result.value is not None:
        print(json.dumps(result.value, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

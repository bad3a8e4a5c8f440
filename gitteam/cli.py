"""Command line entry point with the enable and status commands."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Callable, Mapping

from .activation import GitConfigActivationValidator
from .commandadapter import resolve_aliases, run
from .commit_settings import StaticValueCommitSettingsSource
from .completion import AliasShellCompletion
from .config import GitConfigConfigSource
from .core import Policy, sanity_check_coauthors
from .effects import Effect, ExitError, exit_err_msg, exit_ok
from .enable import (
    Aborted,
    EnableDependencies,
    EnablePolicy,
    EnableRequest,
    Failed,
    Succeeded,
)
from .gitconfig import GitConfig
from .state import GitConfigStateSink, GitConfigStateSource
from .status import StatusPolicy, map_event_to_effect

# Installed hook file name -> file name in the hook scripts directory.
_HOOK_SCRIPT_SOURCES = {
    "proxy.sh": "proxy.sh",
    "prepare-commit-msg": "prepare-commit-msg.sh",
    "prepare-commit-msg-git-team.sh": "prepare-commit-msg-git-team.sh",
}

_DEFAULT_HOOK_SCRIPTS_DIR = Path(__file__).resolve().parent / "hookscripts"


def fold_errors(errors: list[Exception]) -> Exception:
    """Join several errors into one, separated by "; "."""
    joined = "".join(f"{error}; " for error in errors)
    return RuntimeError(joined.rstrip("; "))


def enable_event_mapper(status_policy: Policy | None) -> Callable[[Any], Effect]:
    """Build the mapper from enable events to effects; success reports the status."""

    def map_event(event: Any) -> Effect:
        if isinstance(event, (Succeeded, Aborted)):
            return map_event_to_effect(status_policy.apply())
        if isinstance(event, Failed):
            return exit_err_msg(fold_errors(event.reasons))
        return exit_ok()

    return map_event


def default_status_policy() -> StatusPolicy:
    """The status policy backed by the git command."""
    return StatusPolicy(
        config_reader=GitConfigConfigSource(GitConfig()),
        state_reader=GitConfigStateSource(GitConfig()),
        activation_validator=GitConfigActivationValidator(GitConfig()),
    )


def _make_dirs(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def _write_file(path: str, data: str, mode: int) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(data)
    os.chmod(path, mode)


def default_enable_policy(
    coauthors: list[str], use_all: bool, hook_scripts: Mapping[str, str]
) -> EnablePolicy:
    """The enable policy backed by the file system and the git command."""
    return EnablePolicy(
        deps=EnableDependencies(
            sanity_check_coauthors=sanity_check_coauthors,
            commit_settings_reader=StaticValueCommitSettingsSource(),
            create_template_dir=_make_dirs,
            write_template_file=_write_file,
            create_hooks_dir=_make_dirs,
            write_hook_file=_write_file,
            lstat=os.lstat,
            remove=os.remove,
            symlink=os.symlink,
            resolve_aliases=resolve_aliases,
            config_reader=GitConfigConfigSource(GitConfig()),
            gitconfig_writer=GitConfig(),
            gitconfig_reader=GitConfig(),
            state_writer=GitConfigStateSink(GitConfig()),
            getenv=os.getenv,
            getcwd=os.getcwd,
            activation_validator=GitConfigActivationValidator(GitConfig()),
            hook_scripts=hook_scripts,
        ),
        request=EnableRequest(list(coauthors), use_all),
    )


def _load_hook_scripts(directory: Path) -> dict[str, str]:
    return {
        name: (directory / source).read_text(encoding="utf-8")
        for name, source in _HOOK_SCRIPT_SOURCES.items()
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="git-team")
    commands = parser.add_subparsers(dest="command")

    enable = commands.add_parser(
        "enable",
        help="Enables injection of the provided co-authors whenever `git-commit` is used",
    )
    enable.add_argument(
        "coauthors",
        nargs="*",
        help='A co-author must either be an alias or of the shape "Name <email>"',
    )
    enable.add_argument("-A", "--all", action="store_true", help="Use all known co-authors")
    enable.add_argument(
        "--hook-scripts",
        default=str(_DEFAULT_HOOK_SCRIPTS_DIR),
        help="Directory holding the hook scripts to install",
    )
    enable.add_argument(
        "--generate-bash-completion", action="store_true", help=argparse.SUPPRESS
    )

    commands.add_parser("status", help="Print the current status")
    return parser


def _enable(args: argparse.Namespace) -> None:
    if args.generate_bash_completion:
        for alias in AliasShellCompletion(GitConfig()).complete(args.coauthors):
            print(alias)
        return

    try:
        hook_scripts = _load_hook_scripts(Path(args.hook_scripts))
    except OSError as exc:
        exit_err_msg(f"failed to load hook scripts: {exc}").run()
        return

    run(
        default_enable_policy(args.coauthors, args.all, hook_scripts),
        enable_event_mapper(default_status_policy()),
    )


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "status":
            run(default_status_policy(), map_event_to_effect)
        else:
            _enable(args)
    except ExitError as exc:
        if exc.message:
            print(exc.message, file=sys.stderr)
        return exc.code
    return 0


if __name__ == "__main__":
    sys.exit(main())
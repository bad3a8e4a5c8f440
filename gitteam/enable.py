"""The enable command: activate co-authoring with a set of co-authors."""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .activation import ActivationValidator
from .commit_settings import CommitSettingsReader
from .config import ConfigError, ConfigReader
from .enable_utils import partition, prepare_for_commit_message
from .gitconfig import GitConfigReader, GitConfigWriter
from .gitconfig_errors import GitConfigError, SectionOrKeyIsInvalidError
from .scopes import ActivationScope, GitConfigScope
from .state import StateError, StateWriter

HOOK_SCRIPT_NAMES = ("proxy.sh", "prepare-commit-msg", "prepare-commit-msg-git-team.sh")

PROXIED_GIT_HOOKS = (
    "applypatch-msg",
    "commit-msg",
    "fsmonitor-watchman",
    "p4-pre-submit",
    "post-applypatch",
    "post-checkout",
    "post-commit",
    "post-index-change",
    "post-merge",
    "post-receive",
    "post-rewrite",
    "post-update",
    "pre-applypatch",
    "pre-auto-gc",
    "pre-commit",
    "pre-push",
    "pre-rebase",
    "pre-receive",
    "push-to-checkout",
    "sendemail-validate",
    "update",
)


@dataclass(frozen=True)
class Aborted:
    """Nothing was enabled because no co-authors were provided."""


@dataclass(frozen=True)
class Succeeded:
    """Co-authoring was enabled."""


@dataclass(frozen=True)
class Failed:
    """Enabling failed for the given reasons."""

    reasons: list[Exception] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [str(reason) for reason in self.reasons]


@dataclass
class EnableDependencies:
    """Everything the enable policy talks to."""

    sanity_check_coauthors: Callable[[list[str]], list[Exception]]
    commit_settings_reader: CommitSettingsReader
    create_template_dir: Callable[[str], Any]
    write_template_file: Callable[[str, str, int], Any]
    create_hooks_dir: Callable[[str], Any]
    write_hook_file: Callable[[str, str, int], Any]
    lstat: Callable[[str], Any]
    remove: Callable[[str], Any]
    symlink: Callable[[str, str], Any]
    resolve_aliases: Callable[[list[str]], tuple[list[str], list[Exception]]]
    config_reader: ConfigReader
    gitconfig_writer: GitConfigWriter
    gitconfig_reader: GitConfigReader
    state_writer: StateWriter
    getenv: Callable[[str], str | None]
    getcwd: Callable[[], str]
    activation_validator: ActivationValidator
    hook_scripts: Mapping[str, str]


@dataclass
class EnableRequest:
    """The aliases and co-authors to enable, or all known co-authors."""

    aliases_and_coauthors: list[str] = field(default_factory=list)
    use_all: bool = False


def repo_checksum(user: str, repo_path: str) -> str:
    """Return the checksum that keeps commit templates apart per user and repository."""
    return hashlib.md5(f"{user}:{repo_path}".encode("utf-8")).hexdigest()


def _failed(message: str) -> Failed:
    return Failed([RuntimeError(message)])


@dataclass
class EnablePolicy:
    """Enable co-authoring with the requested co-authors."""

    deps: EnableDependencies
    request: EnableRequest

    def apply(self) -> Aborted | Succeeded | Failed:
        """Set up the commit template, hooks and state; return the resulting event."""
        deps = self.deps

        if self.request.use_all:
            try:
                coauthors = self._lookup_all_coauthors()
            except GitConfigError as exc:
                return _failed(f"failed to lookup coauthors: {exc}")
            if not coauthors:
                return Aborted()
        else:
            requested = list(self.request.aliases_and_coauthors)
            if not requested:
                return Aborted()
            candidates, errors = self._apply_additional_guards(requested)
            if errors:
                return Failed(list(errors))
            coauthors = sorted(set(candidates))

        settings = deps.commit_settings_reader.read()

        try:
            cfg = deps.config_reader.read()
        except (ConfigError, GitConfigError) as exc:
            return _failed(f"failed to read config: {exc}")

        scope = cfg.activation_scope
        if (
            scope is ActivationScope.REPO_LOCAL
            and not deps.activation_validator.is_inside_a_git_repository()
        ):
            return _failed(
                f"failed to enable with activation-scope={scope}: not inside a git repository"
            )

        gitconfig_scope = scope.to_gitconfig_scope()

        try:
            self._setup_template(gitconfig_scope, settings.templates_base_dir, coauthors)
        except (OSError, GitConfigError) as exc:
            return _failed(f"failed to setup commit template: {exc}")

        try:
            self._install_hooks(settings.hooks_dir)
        except OSError as exc:
            return _failed(f"failed to install hooks: {exc}")

        try:
            deps.gitconfig_writer.replace_all(gitconfig_scope, "core.hooksPath", settings.hooks_dir)
        except GitConfigError as exc:
            return _failed(f"failed to set core.hooksPath: {exc}")

        try:
            deps.state_writer.persist_enabled(scope, coauthors)
        except (StateError, GitConfigError) as exc:
            return _failed(f"failed to persist state: {exc}")

        return Succeeded()

    def _lookup_all_coauthors(self) -> list[str]:
        try:
            assignments = self.deps.gitconfig_reader.get_regexp(GitConfigScope.GLOBAL, "team.alias")
        except SectionOrKeyIsInvalidError:
            return []
        return sorted(assignments.values())

    def _apply_additional_guards(self, requested: list[str]) -> tuple[list[str], list[Exception]]:
        candidates, aliases = partition(requested)

        sanity_errors = self.deps.sanity_check_coauthors(candidates)
        if sanity_errors:
            return [], list(sanity_errors)

        resolved, resolve_errors = self.deps.resolve_aliases(aliases)
        if resolve_errors:
            return [], list(resolve_errors)

        return candidates + list(resolved), []

    def _setup_template(self, scope: GitConfigScope, base_dir: str, coauthors: list[str]) -> None:
        deps = self.deps
        if scope is GitConfigScope.LOCAL:
            user = deps.getenv("USER") or ""
            working_dir = deps.getcwd()
            template_dir = f"{base_dir}/repo-local/{repo_checksum(user, working_dir)}"
        else:
            template_dir = f"{base_dir}/global"

        deps.create_template_dir(template_dir)

        template_path = f"{template_dir}/COMMIT_TEMPLATE"
        deps.write_template_file(template_path, prepare_for_commit_message(coauthors), 0o644)
        deps.gitconfig_writer.replace_all(scope, "commit.template", template_path)

    def _install_hooks(self, hooks_dir: str) -> None:
        deps = self.deps
        deps.create_hooks_dir(hooks_dir)

        for name in HOOK_SCRIPT_NAMES:
            deps.write_hook_file(os.path.join(hooks_dir, name), deps.hook_scripts[name], 0o755)

        for hook in PROXIED_GIT_HOOKS:
            self._force_create_symlink("proxy.sh", os.path.join(hooks_dir, hook))

    def _force_create_symlink(self, real_path: str, link_path: str) -> None:
        try:
            self.deps.lstat(link_path)
        except OSError:
            pass
        else:
            self.deps.remove(link_path)
        self.deps.symlink(real_path, link_path)
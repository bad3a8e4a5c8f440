# gitteam

Credit everyone you work with. `git-team` keeps a set of active co-authors
and sets up a commit template and git hooks so that a `Co-authored-by:`
trailer can be added for each of them to your commits.

## Installation

```sh
pip install gitteam
```

This installs the `git-team` command. It runs `git config` through
`/usr/bin/env`, so `git` has to be on your `PATH`.

## Hook scripts are not included

`git-team enable` installs three hook scripts, but this package does not ship
them. You have to provide a directory holding these files:

- `proxy.sh`
- `prepare-commit-msg.sh`
- `prepare-commit-msg-git-team.sh`

and pass it with `--hook-scripts DIR`. The default is a `hookscripts`
directory next to the installed `gitteam` package, which does not exist
unless you put it there. If the files cannot be read, `enable` fails with
`error: failed to load hook scripts: ...`.

## Usage

Register aliases for the people you work with in your global git config:

```sh
git config --global team.alias.alice "Alice <alice@example.com>"
git config --global team.alias.bob "Bob <bob@example.com>"
```

Enable co-authoring with aliases, full `Name <email>` entries, or a mix:

```sh
git-team enable --hook-scripts ./hookscripts alice "Carol <carol@example.com>"
```

Use every known alias at once:

```sh
git-team enable --hook-scripts ./hookscripts --all
```

Show what is active:

```sh
git-team status
```

The output looks like this (coloured in a terminal):

```
git-team enabled

co-authors
─ Alice <alice@example.com>
─ Carol <carol@example.com>
```

After a successful `enable` the status is printed the same way. Running
`enable` without any co-authors (or with `--all` when no aliases exist)
changes nothing and prints the current status.

On failure the command prints `error: ...` in red on standard error and
exits with status 1. Several errors, for example invalid co-authors, are
joined with `; `.

### What `enable` writes

- The commit template, with one sorted `Co-authored-by:` line per co-author:
  - global scope: `$HOME/.git-team/commit-templates/global/COMMIT_TEMPLATE`
  - repo-local scope:
    `$HOME/.git-team/commit-templates/repo-local/<md5 of "$USER:<working dir>">/COMMIT_TEMPLATE`
- The hooks in `$HOME/.git-team/hooks`: `proxy.sh`, `prepare-commit-msg` and
  `prepare-commit-msg-git-team.sh` (mode 0755), plus symlinks to `proxy.sh`
  for the other standard git hooks (`commit-msg`, `pre-commit`, `pre-push`,
  and so on). Existing symlinks are replaced.
- `commit.template` and `core.hooksPath` in the git config of the active
  scope.
- The state: `team.state.status` and `team.state.active-coauthors`.

### Alias completion

```sh
git-team enable --generate-bash-completion alice
```

prints, one per line and sorted, the aliases under `team.alias.*` that are
not already given on the command line. The package does not generate a bash
completion script; you have to hook this into your shell yourself.

## Activation scope

`team.config.activation-scope` in the global git config controls where
`git-team` is switched on:

- `global` (the default, also when the key is unset): for all repositories.
- `repo-local`: only for the repository you are in. Each repository then
  gets its own commit template, and `enable` and `status` fail outside a
  git repository.

```sh
git config --global team.config.activation-scope repo-local
```

Any other value is rejected as an unknown activation scope.

## Rules for co-authors

An argument that contains a space is taken to be a co-author. It has to
contain ` <`, end with `>` and contain an `@`. Any other argument is taken to
be an alias and is looked up as `team.alias.<alias>` in the global git
config; an alias that cannot be found is an error. Repeated co-authors are
listed only once.

## What the package does not do

The command line has only `enable` and `status`. There is no command to
disable co-authoring, to add or remove aliases, or to change the activation
scope; use `git config` for aliases and the scope. No man page is provided.

## Using it as a library

The building blocks can be used directly:

- `gitteam.gitconfig.GitConfig` wraps `git config` (`get`, `get_all`,
  `get_regexp`, `list`, `add`, `replace_all`, `unset_all`); it takes a
  `runner` callable, by default `run_git_config`. Failures are raised as the
  `GitConfigError` subclasses in `gitteam.gitconfig_errors`.
- `gitteam.enable.EnablePolicy` and `gitteam.status.StatusPolicy` return
  events (`Succeeded`, `Aborted`, `Failed`, `StateRetrievalSucceeded`,
  `StateRetrievalFailed`) from `apply()`, with all their dependencies passed
  in.
- `gitteam.state`, `gitteam.config` and `gitteam.activation` read and write
  the stored state, configuration and repository check through git config.

## Development

```sh
pip install -e ".[test]"
pytest
```
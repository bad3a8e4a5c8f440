import pytest

from gitteam.scopes import ActivationScope, GitConfigScope


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("global", ActivationScope.GLOBAL),
        ("repo-local", ActivationScope.REPO_LOCAL),
        ("unknown", ActivationScope.UNKNOWN),
        ("some other string", ActivationScope.UNKNOWN),
    ],
)
def test_from_string(candidate, expected):
    assert ActivationScope.from_string(candidate) is expected


@pytest.mark.parametrize(
    "scope, expected",
    [(GitConfigScope.GLOBAL, "--global"), (GitConfigScope.LOCAL, "--local")],
)
def test_flag(scope, expected):
    assert scope.flag() == expected


@pytest.mark.parametrize(
    "scope, expected",
    [
        (ActivationScope.GLOBAL, "global"),
        (ActivationScope.REPO_LOCAL, "repo-local"),
        (ActivationScope.UNKNOWN, "unknown"),
    ],
)
def test_activation_scope_str(scope, expected):
    assert str(scope) == expected


@pytest.mark.parametrize(
    "scope, expected",
    [
        (ActivationScope.GLOBAL, GitConfigScope.GLOBAL),
        (ActivationScope.REPO_LOCAL, GitConfigScope.LOCAL),
    ],
)
def test_to_gitconfig_scope(scope, expected):
    assert scope.to_gitconfig_scope() is expected


@pytest.mark.parametrize(
    "activation_scope, expected_name, expected_flag",
    [
        (ActivationScope.GLOBAL, "global", "--global"),
        (ActivationScope.REPO_LOCAL, "local", "--local"),
    ],
)
def test_gitconfig_scope_str(activation_scope, expected_name, expected_flag):
    gitconfig_scope = activation_scope.to_gitconfig_scope()
    assert str(gitconfig_scope) == expected_name
    assert gitconfig_scope.flag() == expected_flag
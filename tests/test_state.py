import pytest

from gitteam.gitconfig_errors import (
    ConfigFileCannotBeWrittenError,
    SectionOrKeyIsInvalidError,
    TryingToUnsetAnOptionWhichDoesNotExistError,
)
from gitteam.scopes import ActivationScope, GitConfigScope
from gitteam.state import GitConfigStateSink, GitConfigStateSource, State, StateError, Status


class RecordingWriter:
    def __init__(self, unset_error=None, add_error=None, replace_error=None):
        self.calls = []
        self._unset_error = unset_error
        self._add_error = add_error
        self._replace_error = replace_error

    def unset_all(self, scope, key):
        self.calls.append(("unset_all", scope, key))
        if self._unset_error:
            raise self._unset_error

    def add(self, scope, key, value):
        self.calls.append(("add", scope, key, value))
        if self._add_error:
            raise self._add_error

    def replace_all(self, scope, key, value):
        self.calls.append(("replace_all", scope, key, value))
        if self._replace_error:
            raise self._replace_error


class FakeReader:
    def __init__(self, status="", coauthors=None, get_error=None, get_all_error=None):
        self.status = status
        self.coauthors = coauthors or []
        self.get_error = get_error
        self.get_all_error = get_all_error
        self.scopes = []

    def get(self, scope, key):
        self.scopes.append(scope)
        if self.get_error:
            raise self.get_error
        return self.status

    def get_all(self, scope, key):
        self.scopes.append(scope)
        if self.get_all_error:
            raise self.get_all_error
        return list(self.coauthors)


def test_is_enabled_should_be_true():
    assert State.enabled([]).is_enabled() is True


def test_is_enabled_should_be_false():
    assert State.disabled().is_enabled() is False


def test_persist_succeeds():
    writer = RecordingWriter()
    GitConfigStateSink(writer).persist_enabled(ActivationScope.GLOBAL, ["CO-AUTHOR"])
    assert writer.calls == [
        ("unset_all", GitConfigScope.GLOBAL, "team.state.active-coauthors"),
        ("add", GitConfigScope.GLOBAL, "team.state.active-coauthors", "CO-AUTHOR"),
        ("replace_all", GitConfigScope.GLOBAL, "team.state.status", "enabled"),
    ]


def test_persist_succeeds_when_removing_non_existing_active_coauthors():
    writer = RecordingWriter(unset_error=TryingToUnsetAnOptionWhichDoesNotExistError())
    GitConfigStateSink(writer).persist_enabled(ActivationScope.GLOBAL, ["CO-AUTHOR"])
    assert writer.calls[-1] == ("replace_all", GitConfigScope.GLOBAL, "team.state.status", "enabled")


def test_persist_fails_due_to_another_unset_all_failure():
    writer = RecordingWriter(unset_error=ConfigFileCannotBeWrittenError())
    with pytest.raises(StateError, match="failed to unset team.state.active-coauthors"):
        GitConfigStateSink(writer).persist_enabled(ActivationScope.GLOBAL, ["CO-AUTHOR"])


def test_persist_fails_due_to_add_failure():
    writer = RecordingWriter(add_error=ConfigFileCannotBeWrittenError())
    with pytest.raises(StateError, match="failed to set team.state.active-coauthors"):
        GitConfigStateSink(writer).persist_enabled(ActivationScope.GLOBAL, ["CO-AUTHOR"])


def test_persist_fails_due_to_replace_all_failure():
    writer = RecordingWriter(replace_error=SectionOrKeyIsInvalidError())
    with pytest.raises(StateError, match="failed to replace team.state.status"):
        GitConfigStateSink(writer).persist_disabled(ActivationScope.GLOBAL)


@pytest.mark.parametrize(
    "activation_scope, gitconfig_scope",
    [
        (ActivationScope.GLOBAL, GitConfigScope.GLOBAL),
        (ActivationScope.REPO_LOCAL, GitConfigScope.LOCAL),
    ],
)
def test_persist_passes_through_the_correct_scope(activation_scope, gitconfig_scope):
    writer = RecordingWriter()
    GitConfigStateSink(writer).persist_disabled(activation_scope)
    assert [call for call in writer.calls if call[0] == "add"] == []
    assert ("unset_all", gitconfig_scope, "team.state.active-coauthors") in writer.calls
    assert ("replace_all", gitconfig_scope, "team.state.status", "disabled") in writer.calls


def test_query_disabled():
    state = GitConfigStateSource(FakeReader(status="disabled")).query(ActivationScope.GLOBAL)
    assert state == State(Status.DISABLED, [])


def test_query_enabled():
    coauthors = ["Mr. Noujz <noujz@example.com>"]
    reader = FakeReader(status="enabled", coauthors=coauthors)
    state = GitConfigStateSource(reader).query(ActivationScope.GLOBAL)
    assert state == State(Status.ENABLED, coauthors)


def test_query_disabled_when_status_unset():
    state = GitConfigStateSource(FakeReader(status="")).query(ActivationScope.GLOBAL)
    assert state == State(Status.DISABLED, [])


def test_query_disabled_when_reading_status_fails():
    reader = FakeReader(get_error=SectionOrKeyIsInvalidError())
    assert GitConfigStateSource(reader).query(ActivationScope.GLOBAL) == State.disabled()


def test_query_fails_when_active_coauthors_cannot_be_read():
    reader = FakeReader(status="enabled", get_all_error=SectionOrKeyIsInvalidError())
    with pytest.raises(StateError, match="no active co-authors found: section or key is invalid"):
        GitConfigStateSource(reader).query(ActivationScope.GLOBAL)


@pytest.mark.parametrize(
    "activation_scope, gitconfig_scope",
    [
        (ActivationScope.GLOBAL, GitConfigScope.GLOBAL),
        (ActivationScope.REPO_LOCAL, GitConfigScope.LOCAL),
    ],
)
def test_query_translates_activation_scope_to_gitconfig_scope(activation_scope, gitconfig_scope):
    reader = FakeReader(status="enabled", coauthors=["Mr. Noujz <noujz@example.com>"])
    GitConfigStateSource(reader).query(activation_scope)
    assert reader.scopes == [gitconfig_scope, gitconfig_scope]
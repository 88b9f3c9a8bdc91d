"""Tests for the edit-then-maybe-upgrade cycle."""

import pytest

from conftest import FakeExecutor, ScriptedEditor, make_release
from helm_edit.core.edit_workflow import edit_and_maybe_upgrade
from helm_edit.errors import CodecError, EditorLaunchError, NotFoundError, UpgradeError
from helm_edit.models.edit import EditOptions, NoChangeMade, Upgraded


def _run(source, executor, editor, **opts):
    return edit_and_maybe_upgrade(
        "web", EditOptions(**opts), source=source, executor=executor, editor=editor,
    )


def _assert_cleaned_up(editor: ScriptedEditor):
    for path in editor.paths:
        assert not path.exists()
        assert not path.parent.exists()


class TestNoChange:
    def test_untouched_file_skips_upgrade(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1}, config={"a": 1}))
        editor = ScriptedEditor()

        outcome = _run(source, executor, editor)

        assert outcome == NoChangeMade()
        assert outcome.message == "Edit cancelled, no changes made!"
        assert executor.calls == []
        _assert_cleaned_up(editor)

    def test_rewriting_identical_text_skips_upgrade(self, source_for, executor):
        source = source_for(make_release(config={"b": {"c": 2}, "a": 1}))
        editor = ScriptedEditor(new_text="a: 1\nb:\n  c: 2\n")

        assert isinstance(_run(source, executor, editor), NoChangeMade)
        assert executor.calls == []


class TestChanged:
    def test_overrides_exclude_chart_defaults(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1, "b": {"c": 2, "d": 3}}))
        editor = ScriptedEditor(new_text="a: 1\nb:\n  c: 99\n  d: 3\ne: 5\n")

        outcome = _run(source, executor, editor)

        assert isinstance(outcome, Upgraded)
        assert executor.calls[0]["overrides"] == {"b": {"c": 99}, "e": 5}
        assert outcome.overrides == {"b": {"c": 99}, "e": 5}
        assert outcome.notes == "Thank you for installing nginx."
        assert outcome.revision == 2
        assert outcome.message == 'Release "web" has been edited. Happy Helming!'
        _assert_cleaned_up(editor)

    def test_default_equal_edit_still_upgrades_with_empty_overrides(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1}, config={}))
        editor = ScriptedEditor(new_text="a: 1\n")

        outcome = _run(source, executor, editor)

        assert isinstance(outcome, Upgraded)
        assert executor.calls[0]["overrides"] == {}

    def test_disabled_subtraction_keeps_edited_document(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1}, config={}))
        editor = ScriptedEditor(new_text="a: 1\n")

        _run(source, executor, editor, disable_default_subtraction=True)

        assert executor.calls[0]["overrides"] == {"a": 1}

    def test_whitespace_only_edit_triggers_upgrade(self, source_for, executor):
        source = source_for(make_release(config={"a": 1}))
        editor = ScriptedEditor(new_text="a: 1\n\n")

        assert isinstance(_run(source, executor, editor), Upgraded)
        assert executor.calls[0]["overrides"] == {"a": 1}

    def test_deleting_everything_upgrades_with_empty_overrides(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1}, config={"a": 2}))
        editor = ScriptedEditor(new_text="")

        outcome = _run(source, executor, editor)

        assert executor.calls[0]["overrides"] == {}
        assert outcome.previous_overrides == {"a": 2}

    def test_wait_and_timeout_are_forwarded(self, source_for, executor):
        source = source_for(make_release())
        editor = ScriptedEditor(new_text="x: 1\n")

        _run(source, executor, editor, wait=True, timeout=42.0)

        assert executor.calls[0]["wait"] is True
        assert executor.calls[0]["timeout"] == 42.0


class TestPresentation:
    def test_raw_values_are_presented_by_default(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1, "b": 2}, config={"b": 3}))
        editor = ScriptedEditor()

        _run(source, executor, editor)

        assert editor.seen == ["b: 3\n"]

    def test_all_values_presents_computed_document(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1, "b": 2}, config={"b": 3}))
        editor = ScriptedEditor()

        _run(source, executor, editor, all_values=True)

        assert editor.seen == ["a: 1\nb: 3\n"]

    def test_empty_overrides_present_empty_map(self, source_for, executor):
        source = source_for(make_release(defaults={"a": 1}))
        editor = ScriptedEditor()

        _run(source, executor, editor)

        assert editor.seen == ["{}\n"]

    def test_old_revision_values_applied_to_latest_chart(self, source_for, executor):
        source = source_for(
            make_release(version=1, config={"x": 1}),
            make_release(version=2, config={"x": 2}),
        )
        editor = ScriptedEditor(new_text="x: 1\n")

        outcome = _run(source, executor, editor, revision=1)

        assert editor.seen == ["x: 1\n"]
        # saving the old values untouched does not roll them forward
        assert isinstance(outcome, NoChangeMade)

    def test_old_revision_edit_upgrades_latest(self, source_for, executor):
        source = source_for(
            make_release(version=1, config={"x": 1}),
            make_release(version=2, config={"x": 2}),
        )
        editor = ScriptedEditor(new_text="x: 3\n")

        _run(source, executor, editor, revision=1)

        assert executor.calls[0]["release"].version == 2
        assert executor.calls[0]["overrides"] == {"x": 3}

    def test_editor_command_is_passed_through(self, source_for, executor):
        source = source_for(make_release())
        editor = ScriptedEditor()

        _run(source, executor, editor, editor_command="code --wait")

        assert editor.commands == ["code --wait"]


class TestFailures:
    def test_unknown_release(self, source_for, executor):
        editor = ScriptedEditor()
        with pytest.raises(NotFoundError):
            _run(source_for(), executor, editor)
        assert editor.paths == []

    def test_unknown_revision(self, source_for, executor):
        editor = ScriptedEditor()
        with pytest.raises(NotFoundError):
            _run(source_for(make_release(version=1)), executor, editor, revision=5)
        assert editor.paths == []

    def test_editor_failure_aborts_and_cleans_up(self, source_for, executor):
        source = source_for(make_release())
        editor = ScriptedEditor(error=EditorLaunchError("editor 'vi' exited with status 1"))

        with pytest.raises(EditorLaunchError):
            _run(source, executor, editor)

        assert executor.calls == []
        assert len(editor.paths) == 1
        _assert_cleaned_up(editor)

    def test_malformed_edit_is_reported(self, source_for, executor):
        source = source_for(make_release())
        editor = ScriptedEditor(new_text="a: [1\n")

        with pytest.raises(CodecError):
            _run(source, executor, editor)

        assert executor.calls == []
        _assert_cleaned_up(editor)

    def test_non_map_edit_is_reported(self, source_for, executor):
        source = source_for(make_release())
        editor = ScriptedEditor(new_text="- a\n")

        with pytest.raises(CodecError):
            _run(source, executor, editor)
        assert executor.calls == []

    def test_upgrade_failure_propagates(self, source_for):
        source = source_for(make_release())
        failing = FakeExecutor(error=UpgradeError("helm upgrade failed: boom"))
        editor = ScriptedEditor(new_text="a: 2\n")

        with pytest.raises(UpgradeError, match="boom"):
            _run(source, failing, editor)
        assert len(failing.calls) == 1
        _assert_cleaned_up(editor)

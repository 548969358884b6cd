import pytest

from lined.keymaps import (
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeySequence,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_registry(*action_ids: str) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in action_ids or ("core.test",):
        registry.register_action(ActionRef(action_id, lambda *_: None))
    return registry


def make_binding(
    binding_id: str,
    *keys: str,
    mode: str = "normal",
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*(keys or ("g", "g"))),
        action_id=action_id,
    )


def binding_ids(registry: KeymapRegistry, mode: str | None = None) -> list[str]:
    return [binding.id for binding in registry.iter_bindings(mode)]


def test_registered_binding_is_listed_for_its_mode() -> None:
    registry = make_registry()
    gg = make_binding("normal.gg")

    registry.register_binding(gg)

    assert list(registry.iter_bindings("normal")) == [gg]
    assert binding_ids(registry, "insert") == []


def test_registration_bumps_revision() -> None:
    registry = make_registry()
    before = registry.revision()

    registry.register_binding(make_binding("normal.gg"))

    assert registry.revision() == before + 1


def test_identical_keys_conflict() -> None:
    registry = make_registry()
    registry.register_binding(make_binding("normal.gg"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding("normal.gg.again"))


def test_prefix_of_chord_is_a_conflict() -> None:
    registry = make_registry()
    registry.register_binding(make_binding("normal.dd", "d", "d"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding("normal.d", "d"))

    assert [b.id for b in excinfo.value.conflicts] == ["normal.dd"]


def test_same_keys_in_other_mode_do_not_conflict() -> None:
    registry = make_registry()
    registry.register_binding(make_binding("normal.d", "d"))
    registry.register_binding(make_binding("visual.d", "d", mode="visual"))

    assert binding_ids(registry, "normal") == ["normal.d"]
    assert binding_ids(registry, "visual") == ["visual.d"]


def test_duplicate_binding_id_requires_replace() -> None:
    registry = make_registry()
    registry.register_binding(make_binding("jump"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding("jump", "G"))


def test_replace_swaps_binding_with_same_id() -> None:
    registry = make_registry()
    registry.register_binding(make_binding("jump"))
    moved = make_binding("jump", "G")

    registry.register_binding(moved, replace=True)

    assert list(registry.iter_bindings()) == [moved]


def test_replace_evicts_conflicting_binding() -> None:
    registry = make_registry()
    registry.register_binding(make_binding("old"))

    registry.register_binding(make_binding("new"), replace=True)

    assert binding_ids(registry) == ["new"]


def test_duplicate_action_requires_replace() -> None:
    registry = make_registry()

    with pytest.raises(ValueError):
        registry.register_action(ActionRef("core.test", lambda *_: None))


def test_unknown_action_is_rejected() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding("orphan"))


def test_defaults_cover_every_mode() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    bindings = list(registry.iter_bindings())
    assert len(bindings) == len(DEFAULT_BINDINGS)
    assert {binding.mode for binding in bindings} == {
        "command",
        "insert",
        "normal",
        "visual",
        "visual_block",
        "visual_line",
    }


def test_default_chords_are_two_strokes() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    chords = {
        binding.key_signature
        for binding in registry.iter_bindings("normal")
        if binding.sequence.is_chord
    }

    assert chords == {"g g", "d d", "y y", "c c", "> >", "< <"}


def test_override_replaces_default_on_same_keys() -> None:
    registry = KeymapRegistry()
    paste_on_x = Binding(
        id="normal.paste_x",
        mode="normal",
        sequence=KeySequence.from_strings("x"),
        action_id="edit.paste",
    )

    load_default_keymaps(registry, overrides=(paste_on_x,))

    ids = set(binding_ids(registry, "normal"))
    assert "normal.paste_x" in ids
    assert "normal.delete_char" not in ids

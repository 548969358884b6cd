from __future__ import annotations

from lined.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeymapRegistry,
    KeymapResolver,
)


def bind(
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


def make_resolver(*bindings: Binding) -> tuple[KeymapRegistry, KeymapResolver]:
    registry = KeymapRegistry()
    for action_id in sorted({b.action_id for b in bindings}):
        registry.register_action(ActionRef(action_id, lambda *_: None))
    for binding in bindings:
        registry.register_binding(binding)
    return registry, KeymapResolver(registry)


def test_full_chord_matches() -> None:
    _, resolver = make_resolver(bind("normal.gg"))

    result = resolver.resolve("normal", ("g", "g"))

    assert result.is_match
    assert result.match is not None
    assert result.match.binding.id == "normal.gg"
    assert result.match.action.id == "core.test"
    assert result.consumed == 2


def test_chord_prefix_is_pending() -> None:
    _, resolver = make_resolver(bind("normal.gg"))

    result = resolver.resolve("normal", ("g",))

    assert result.status == "pending"
    assert result.match is None


def test_broken_chord_misses() -> None:
    _, resolver = make_resolver(bind("normal.gg"))

    result = resolver.resolve("normal", ("g", "x"))

    assert result.status == "miss"
    assert result.consumed == 1


def test_no_tokens_is_a_miss() -> None:
    _, resolver = make_resolver(bind("normal.gg"))

    assert resolver.resolve("normal", ()).status == "miss"


def test_chord_and_single_key_resolve_side_by_side() -> None:
    _, resolver = make_resolver(
        bind("normal.dd", "d", "d", action_id="edit.delete_line"),
        bind("normal.x", "x", action_id="edit.delete_char"),
    )

    single = resolver.resolve("normal", ("x",))
    chord = resolver.resolve("normal", ("d", "d"))

    assert single.match is not None
    assert single.match.action.id == "edit.delete_char"
    assert chord.match is not None
    assert chord.match.action.id == "edit.delete_line"


def test_bindings_are_scoped_per_mode() -> None:
    _, resolver = make_resolver(bind("visual.y", "y", mode="visual"))

    assert resolver.resolve("normal", ("y",)).status == "miss"
    assert resolver.resolve("visual", ("y",)).status == "match"


def test_new_binding_is_seen_after_registration() -> None:
    registry, resolver = make_resolver()
    assert resolver.resolve("normal", ("x",)).status == "miss"

    registry.register_action(ActionRef("core.x", lambda *_: None))
    registry.register_binding(bind("normal.x", "x", action_id="core.x"))

    result = resolver.resolve("normal", ("x",))
    assert result.match is not None
    assert result.match.binding.id == "normal.x"


def test_replaced_binding_is_seen_after_registration() -> None:
    registry, resolver = make_resolver(bind("normal.jump", "g", "g"))
    assert resolver.resolve("normal", ("g",)).status == "pending"

    registry.register_binding(bind("normal.jump", "G"), replace=True)

    assert resolver.resolve("normal", ("g",)).status == "miss"
    assert resolver.resolve("normal", ("G",)).is_match


def test_modifier_token_resolves() -> None:
    _, resolver = make_resolver(bind("normal.block", "ctrl+v", action_id="core.block"))

    assert resolver.resolve("normal", ("ctrl+v",)).is_match

"""Registry of named actions and the bindings that reach them."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from lined.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """A binding would compete with bindings already registered."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        ids = ", ".join(conflict.id for conflict in self.conflicts)
        super().__init__(f"Binding '{binding.id}' conflicts with [{ids}]")


class KeymapRegistry:
    """Owns action references and per-mode bindings.

    A chord waits for its next key indefinitely, so a sequence that is a
    prefix of another in the same mode would leave the longer one
    unreachable. Such overlaps are rejected just like exact duplicates.
    Every change bumps :meth:`revision` so resolvers know to rebuild.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_mode: Dict[str, Dict[str, Binding]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``; with ``replace`` evict whatever it collides with."""

        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' targets unknown action "
                    f"'{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding, ignore=(binding.id,))
            existing = self._bindings.get(binding.id)
            if not replace:
                if conflicts:
                    handle.add_metadata("conflicts", [c.id for c in conflicts])
                    raise KeymapConflictError(binding, conflicts)
                if existing is not None:
                    raise ValueError(f"Binding id '{binding.id}' already registered")

            for stale in conflicts:
                self._discard(stale)
            if existing is not None:
                self._discard(existing)
            self._bindings[binding.id] = binding
            self._by_mode.setdefault(binding.mode, {})[binding.id] = binding
            self._revision += 1
            return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            return iter(list(self._bindings.values()))
        return iter(list(self._by_mode.get(mode, {}).values()))

    def detect_conflicts(
        self, binding: Binding, *, ignore: Iterable[str] = ()
    ) -> List[Binding]:
        skipped = set(ignore)
        return [
            other
            for other in self._by_mode.get(binding.mode, {}).values()
            if other.id not in skipped and binding.shadows(other)
        ]

    def _discard(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        bucket = self._by_mode.get(binding.mode)
        if bucket is None:
            return
        bucket.pop(binding.id, None)
        if not bucket:
            del self._by_mode[binding.mode]


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
]

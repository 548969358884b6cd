"""Resolve typed key tokens against a mode's bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Literal, Optional, Sequence

from lined.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry

Status = Literal["match", "pending", "miss"]


@dataclass(slots=True)
class TrieNode:
    binding: Optional[Binding] = None
    children: Dict[str, "TrieNode"] = field(default_factory=dict)


@dataclass(slots=True)
class KeymapTrie:
    """Prefix tree over one mode's bindings at a given registry revision."""

    mode: str
    revision: int = 0
    root: TrieNode = field(default_factory=TrieNode)

    @classmethod
    def build(
        cls, mode: str, revision: int, bindings: Iterable[Binding]
    ) -> "KeymapTrie":
        trie = cls(mode=mode, revision=revision)
        for binding in bindings:
            trie.add_binding(binding)
        return trie

    def add_binding(self, binding: Binding) -> None:
        node = self.root
        for token in binding.sequence.tokens:
            node = node.children.setdefault(token, TrieNode())
        node.binding = binding

    def walk(self, tokens: Sequence[str]) -> tuple[Optional[TrieNode], int]:
        """Follow ``tokens`` from the root; ``None`` once a token has no edge."""

        node = self.root
        for consumed, token in enumerate(tokens):
            child = node.children.get(token)
            if child is None:
                return None, consumed
            node = child
        return node, len(tokens)


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """What a token sequence amounts to in a mode.

    ``pending`` means the tokens are a strict prefix of at least one chord
    and the caller should hold them until the next key arrives.
    """

    status: Status
    match: Optional[ResolutionMatch] = None
    consumed: int = 0

    @property
    def is_match(self) -> bool:
        return self.status == "match" and self.match is not None


class KeymapResolver:
    """Caches one trie per mode and rebuilds it when the registry changes."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._tries: Dict[str, KeymapTrie] = {}

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        keys = tuple(tokens)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "keys": " ".join(keys)},
        ) as handle:
            result = self._resolve(mode, keys)
            handle.add_metadata("status", result.status)
            if result.match is not None:
                handle.add_metadata("binding_id", result.match.binding.id)
            return result

    def _resolve(self, mode: str, keys: tuple[str, ...]) -> ResolutionResult:
        if not keys:
            return ResolutionResult(status="miss")
        node, consumed = self._trie(mode).walk(keys)
        if node is None:
            return ResolutionResult(status="miss", consumed=consumed)

        if node.binding is not None:
            action = self._registry.get_action(node.binding.action_id)
            match = ResolutionMatch(binding=node.binding, action=action)
            return ResolutionResult(status="match", match=match, consumed=consumed)
        if node.children:
            return ResolutionResult(status="pending", consumed=consumed)
        return ResolutionResult(status="miss", consumed=consumed)

    def _trie(self, mode: str) -> KeymapTrie:
        revision = self._registry.revision()
        trie = self._tries.get(mode)
        if trie is None or trie.revision != revision:
            trie = KeymapTrie.build(
                mode, revision, self._registry.iter_bindings(mode)
            )
            self._tries[mode] = trie
        return trie


__all__ = [
    "KeymapResolver",
    "KeymapTrie",
    "ResolutionResult",
    "ResolutionMatch",
]

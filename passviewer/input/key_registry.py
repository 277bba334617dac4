"""Reusable key-combo registry primitives."""

from __future__ import annotations

from dataclasses import dataclass

from ..actions import Action


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action."""

    combos: tuple[str, ...]
    action: Action


class KeyComboRegistry:
    """Small exact-match key lookup table."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing actions for same combos."""
        for combo in binding.combos:
            self._actions[combo] = binding.action
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def extended(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Return a copy of this registry with ``bindings`` layered on top."""
        registry = KeyComboRegistry()
        registry._actions = dict(self._actions)
        return registry.register_bindings(*bindings)

    def lookup(self, key: str) -> Action | None:
        return self._actions.get(key)


__all__ = ["KeyComboBinding", "KeyComboRegistry"]

# Author: gadwant
from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "__"
DEFAULT_NAMESPACE = "__."
FALLBACK_FEATURE = "Aot"
NESTED_SEPARATOR = "$"

_LOCALS = "<locals>"


@dataclass(frozen=True)
class GeneratedName:
    namespace: str
    short_name: str

    @property
    def full_name(self) -> str:
        if not self.namespace:
            return self.short_name
        return f"{self.namespace}.{self.short_name}"

    def __str__(self) -> str:
        return self.full_name


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def clean_feature_name(feature_name: str) -> str:
    """Collapse ``feature_name`` into a single capitalized word of letters.

    Anything that is not a letter is dropped and starts a new word, so
    ``"my feature-name"`` becomes ``"MyFeatureName"``. Falls back to
    ``FALLBACK_FEATURE`` when no letter is left.
    """
    clean: list[str] = []
    last_not_letter = True
    for ch in feature_name:
        if not ch.isalpha():
            last_not_letter = True
            continue
        clean.append(ch.upper() if last_not_letter else ch)
        last_not_letter = False
    return "".join(clean) or FALLBACK_FEATURE


def target_name(target: str | type) -> str:
    if isinstance(target, type):
        # nested classes show up as dots in __qualname__, local ones add <locals>
        parts = [part for part in target.__qualname__.split(".") if part != _LOCALS]
        return f"{target.__module__}.{NESTED_SEPARATOR.join(parts)}"
    return target


def normalize_target(target: str | type) -> str:
    return target_name(target).replace(NESTED_SEPARATOR, "_")


def split_name(name: str) -> GeneratedName:
    namespace, _, short_name = name.rpartition(".")
    return GeneratedName(namespace=namespace, short_name=short_name)

"""
Lookup selectors for linked list searches.

A search is driven by exactly one selector: either a plain value compared
with ``==`` (suits value types) or a matcher predicate applied to each
stored value (suits structured types).
"""

from typing import Annotated, Any, Callable, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


# Marks "no value supplied"; None is a legitimate stored value.
UNSET: Any = object()


class ValueSelector(BaseModel):
    """Match entries whose stored value equals ``value``"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["value"] = "value"
    value: Any

    def matches(self, data: Any) -> bool:
        return data == self.value


class MatcherSelector(BaseModel):
    """Match entries for which ``matcher(value)`` is truthy"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["matcher"] = "matcher"
    matcher: Callable[[Any], bool]

    def matches(self, data: Any) -> bool:
        return bool(self.matcher(data))


Selector = Annotated[Union[ValueSelector, MatcherSelector], Field(discriminator="kind")]


def build_selector(
    value: Any = UNSET,
    matcher: Optional[Callable[[Any], bool]] = None
) -> Optional[Union[ValueSelector, MatcherSelector]]:
    """
    Turn the keyword lookup form into a selector.

    The matcher wins when both are given. Returns None when neither is
    given, which callers treat as "matches nothing".
    """
    if matcher is not None:
        return MatcherSelector(matcher=matcher)
    if value is not UNSET:
        return ValueSelector(value=value)
    return None

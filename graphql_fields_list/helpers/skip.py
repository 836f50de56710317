import re
from typing import Iterable, Union

SkipRules = dict[str, Union[bool, "SkipRules"]]
SkipValue = Union[bool, SkipRules]

WILDCARD = "*"


class SkipTree:
    """
    Compiled form of the `skip` option.

    Each pattern is a dot-notation path, e.g. `users.password`. A `*`
    segment stands for "this field and everything beneath it", so
    `users.*` is the same as `users`, while `*Id` (or `user*.id`) is
    matched against field names at traversal time. A wildcard pattern only
    has to match part of the name, so `user*` also skips `superuser`.

    `rules` is a nested dict keyed by path segment where `True` means
    "skip" and a dict means "skip some of the children".
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.rules: SkipRules = {}
        self._regexes: dict[str, re.Pattern] = {}

        for pattern in patterns:
            self.add(pattern)

    def add(self, pattern: str) -> None:
        segments = pattern.split(".")
        rules = self.rules
        i = 0

        while i < len(segments):
            segment = segments[i]
            skip_all = i + 1 < len(segments) and segments[i + 1] == WILDCARD

            if segment not in rules:
                rules[segment] = True if i == len(segments) - 1 or skip_all else {}
                if skip_all:
                    i += 1

            value = rules[segment]
            if value is True:
                # already skipped entirely, nothing more specific applies
                return

            rules = value
            i += 1

    def lookup(self, name: str, scope: SkipValue) -> SkipValue:
        """
        Resolve the skip rule for field `name` within `scope`, which is
        either a (sub) rules dict or False. Returns True when the field is
        to be skipped, a dict of rules for its children, or False.
        """
        if not scope:
            return False

        if name in scope:
            return scope[name]

        match = False
        for pattern, value in scope.items():
            if WILDCARD not in pattern:
                continue
            if self._regex(pattern).search(name):
                match = value
                if value is True:
                    break

        return match

    def _regex(self, pattern: str) -> re.Pattern:
        regex = self._regexes.get(pattern)
        if regex is None:
            regex = re.compile(
                ".*".join(re.escape(part) for part in pattern.split(WILDCARD))
            )
            self._regexes[pattern] = regex
        return regex

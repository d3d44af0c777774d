## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import logging
from typing import Callable
from dataclasses import dataclass, field

from .errors import CombinatorNameError
from .combinators import Combinator, SpecialForm


logger = logging.getLogger(__name__)

Entry = Combinator | SpecialForm


@dataclass
class Catalog:
    entries: dict[str, Entry] = field(default_factory=dict)
    aliases: dict[str, str] = field(default_factory=dict)

    # Registration helpers
    def add_combinator(self, symbol: str, name: str, source: str, *, ascii_name: str | None = None) -> Combinator:
        comb = Combinator(symbol, name, source, ascii_name=ascii_name)
        self._register(comb)
        return comb

    def add_special(self, symbol: str, name: str, source: str, builder: Callable, *, ascii_name: str | None = None, returns: str = '') -> SpecialForm:
        form = SpecialForm(symbol, name, source, builder, ascii_name=ascii_name, returns=returns)
        self._register(form)
        return form

    def _register(self, entry: Entry) -> None:
        if entry.symbol in self.entries:
            raise CombinatorNameError(f"Combinator `{entry.symbol}` is already registered.", aviary_token=entry.symbol)
        self.entries[entry.symbol] = entry
        for alias in (entry.ascii_name, entry.name.lower()):
            if alias != entry.symbol:
                self.aliases.setdefault(alias, entry.symbol)
        logger.debug("registered %s = %s", entry.symbol, entry.name)

    def ensure_consistent(self) -> None:
        for alias, symbol in self.aliases.items():
            assert symbol in self.entries, f"Alias `{alias}` points to unknown `{symbol}`."

    # Lookup
    def get(self, name: str) -> Entry:
        resolved = self.aliases.get(name, self.aliases.get(name.lower(), name))
        if (entry := self.entries.get(resolved)) is not None:
            return entry
        raise CombinatorNameError(f"Combinator `{name}` not found in catalog.", aviary_token=name)

    def __getitem__(self, name: str) -> Entry:
        return self.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.entries or name in self.aliases or name.lower() in self.aliases

    def __iter__(self):
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

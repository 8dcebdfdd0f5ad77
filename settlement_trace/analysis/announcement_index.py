from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from chia_rs.sized_bytes import bytes32

from settlement_trace.types.announcement import AnnouncementAssertion, AnnouncementCreation, AnnouncementScope
from settlement_trace.types.conditions import (
    AssertCoinAnnouncement,
    AssertPuzzleAnnouncement,
    Condition,
    CreateCoinAnnouncement,
    CreatePuzzleAnnouncement,
)
from settlement_trace.types.spend_record import SpendRecord
from settlement_trace.util.hash import derive_announcement_id

log = logging.getLogger(__name__)

CREATION_SCOPES: dict[type[Condition], AnnouncementScope] = {
    CreateCoinAnnouncement: AnnouncementScope.COIN,
    CreatePuzzleAnnouncement: AnnouncementScope.PUZZLE,
}

ASSERTION_SCOPES: dict[type[Condition], AnnouncementScope] = {
    AssertCoinAnnouncement: AnnouncementScope.COIN,
    AssertPuzzleAnnouncement: AnnouncementScope.PUZZLE,
}


@dataclass(frozen=True)
class AnnouncementGraph:
    """
    Creations and assertions of one announcement scope. Edges run from the coin that
    creates an announcement to every coin that asserts it.
    """

    scope: AnnouncementScope
    creations: Mapping[bytes32, AnnouncementCreation]
    assertions: Sequence[AnnouncementAssertion]
    _creations_by_coin: dict[bytes32, list[AnnouncementCreation]] = field(init=False, repr=False, compare=False)
    _asserting_coins: dict[bytes32, list[bytes32]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        creations_by_coin: dict[bytes32, list[AnnouncementCreation]] = {}
        for creation in self.creations.values():
            creations_by_coin.setdefault(creation.coin_id, []).append(creation)
        asserting_coins: dict[bytes32, list[bytes32]] = {}
        for assertion in self.assertions:
            asserting_coins.setdefault(assertion.announcement_id, []).append(assertion.coin_id)
        object.__setattr__(self, "_creations_by_coin", creations_by_coin)
        object.__setattr__(self, "_asserting_coins", asserting_coins)

    def creations_by(self, coin_id: bytes32) -> list[AnnouncementCreation]:
        return self._creations_by_coin.get(coin_id, [])

    def coins_asserting(self, announcement_id: bytes32) -> list[bytes32]:
        return self._asserting_coins.get(announcement_id, [])

    def direct_successors(self, coin_id: bytes32) -> set[bytes32]:
        coins: set[bytes32] = set()
        for creation in self.creations_by(coin_id):
            coins.update(self.coins_asserting(creation.announcement_id))
        return coins


@dataclass(frozen=True)
class AnnouncementIndex:
    coin: AnnouncementGraph
    puzzle: AnnouncementGraph

    @property
    def graphs(self) -> tuple[AnnouncementGraph, AnnouncementGraph]:
        return self.coin, self.puzzle

    def graph(self, scope: AnnouncementScope) -> AnnouncementGraph:
        return self.coin if scope is AnnouncementScope.COIN else self.puzzle


def build_announcement_index(records: Iterable[SpendRecord]) -> AnnouncementIndex:
    """
    Scans every condition of every record and indexes announcement creations by the id they
    produce. A creation whose id is already indexed replaces the earlier one.
    Raises MissingField if a record without a puzzle hash creates a puzzle announcement.
    """
    creations: dict[AnnouncementScope, dict[bytes32, AnnouncementCreation]] = {
        scope: {} for scope in AnnouncementScope
    }
    assertions: dict[AnnouncementScope, list[AnnouncementAssertion]] = {scope: [] for scope in AnnouncementScope}

    for record in records:
        for condition in record.conditions:
            if isinstance(condition, (CreateCoinAnnouncement, CreatePuzzleAnnouncement)):
                scope = CREATION_SCOPES[type(condition)]
                origin_id = scope.origin_id(record)
                creation = AnnouncementCreation(
                    scope,
                    record.coin_id,
                    origin_id,
                    condition.msg,
                    derive_announcement_id(origin_id, condition.msg),
                )
                existing = creations[scope].get(creation.announcement_id)
                if existing is not None and existing.coin_id != creation.coin_id:
                    log.warning(
                        f"{scope.value} announcement {creation.announcement_id.hex()} created by both "
                        f"{existing.coin_id.hex()} and {creation.coin_id.hex()}, keeping the latter"
                    )
                creations[scope][creation.announcement_id] = creation
            elif isinstance(condition, (AssertCoinAnnouncement, AssertPuzzleAnnouncement)):
                scope = ASSERTION_SCOPES[type(condition)]
                assertions[scope].append(AnnouncementAssertion(scope, record.coin_id, condition.announcement_id))

    graphs = {scope: AnnouncementGraph(scope, creations[scope], assertions[scope]) for scope in AnnouncementScope}
    index = AnnouncementIndex(coin=graphs[AnnouncementScope.COIN], puzzle=graphs[AnnouncementScope.PUZZLE])
    for graph in index.graphs:
        log.debug(
            f"{graph.scope.value} announcements: {len(graph.creations)} created, {len(graph.assertions)} asserted"
        )
    return index

from __future__ import annotations

from chia_rs.sized_bytes import bytes32

from settlement_trace.analysis.announcement_index import AnnouncementIndex


def coins_directly_asserted_by(coin_id: bytes32, index: AnnouncementIndex) -> set[bytes32]:
    """
    Coins that assert a coin or puzzle announcement created by `coin_id`.
    """
    coins: set[bytes32] = set()
    for graph in index.graphs:
        coins.update(graph.direct_successors(coin_id))
    return coins


def coins_asserted_by(coin_id: bytes32, index: AnnouncementIndex) -> set[bytes32]:
    """
    Every coin transitively tied to `coin_id` through announcement creation -> assertion edges.
    Each coin is expanded at most once, so cycles terminate. `coin_id` itself is never part of the result.
    """
    coins: set[bytes32] = set()
    visited = {coin_id}
    stack = [coin_id]
    while len(stack) > 0:
        current = stack.pop()
        for asserted in coins_directly_asserted_by(current, index):
            if asserted not in visited:
                visited.add(asserted)
                coins.add(asserted)
                stack.append(asserted)
    return coins

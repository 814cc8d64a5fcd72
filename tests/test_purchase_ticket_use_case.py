import logging
import random
import threading
from collections import Counter

from pulltab.application.dto import PurchaseTicketRequest
from pulltab.application.use_cases import PurchaseTicketUseCase
from pulltab.application.use_cases import purchase_ticket_use_case
from pulltab.domain.entities.symbols import INITIAL_WINNER_DISTRIBUTION, GameSymbol, PrizeTier
from pulltab.domain.exceptions import TransactionConflictError
from tests.fakes import FailingPublisher, InMemoryStatisticsRepository, InMemoryUnitOfWork


def buy(use_case, player_id=1):
    return use_case.execute(PurchaseTicketRequest(player_id=player_id))


def test_first_purchase_creates_box(purchase, store):
    result = buy(purchase)

    assert result.error is None
    assert result.ticket.id == 1
    assert result.ticket.game_box_id == 1
    assert result.box_completed is False
    [box] = store.boxes()
    assert box.remaining_tickets == 499


def test_purchase_response_hides_outcome(purchase):
    body = buy(purchase).to_dict()
    assert body["message"] == "Ticket purchased successfully"
    assert set(body["ticket"]) == {"id", "gameBoxId", "createdAt"}


def test_box_sells_out_with_every_prize_paid(purchase, store):
    results = [buy(purchase, player_id=i % 7) for i in range(500)]

    assert all(r.error is None for r in results)
    assert [r.box_completed for r in results].count(True) == 1
    assert results[-1].box_completed

    [box] = store.boxes()
    assert box.remaining_tickets == 0
    assert box.is_complete
    assert box.total_winners_remaining == 0

    tickets = store.tickets()
    assert len(tickets) == 500
    payouts = Counter(t.total_payout for t in tickets if t.is_winner)
    assert payouts == Counter({int(tier): count for tier, count in INITIAL_WINNER_DISTRIBUTION.items()})
    assert sum(t.total_payout for t in tickets) == 375
    assert all(len(t.winning_lines) <= 1 for t in tickets)


def test_new_box_after_completion(purchase, store):
    for _ in range(500):
        buy(purchase)

    result = buy(purchase)

    assert result.error is None
    assert result.ticket.game_box_id == 2
    first, second = store.boxes()
    assert first.is_complete
    assert second.remaining_tickets == 499


def test_statistics_are_updated(purchase, statistics_repository):
    tickets = [buy(purchase, player_id=42).ticket for _ in range(20)]

    stats = statistics_repository.get(42)
    assert stats.tickets_played == 20
    assert stats.total_winnings == sum(t.total_payout for t in tickets)
    assert stats.biggest_win == max(t.total_payout for t in tickets)
    assert stats.last_played is not None


def test_failure_mid_transaction_rolls_back(store, rng, monkeypatch):
    def broken_save(self, statistics):
        raise RuntimeError("disk full")

    monkeypatch.setattr(InMemoryStatisticsRepository, "save", broken_save)
    use_case = PurchaseTicketUseCase(lambda: InMemoryUnitOfWork(store), rng=rng)

    result = buy(use_case)

    assert result.error == "Failed to purchase ticket"
    assert result.error_code == "internal"
    assert store.boxes() == []
    assert store.tickets() == []
    assert store.state.sequences == {}


class ConflictingUnitOfWork(InMemoryUnitOfWork):
    def commit(self):
        raise TransactionConflictError("write conflict")


def test_conflict_is_retried(store, rng):
    attempts = []

    def factory():
        attempts.append(1)
        return ConflictingUnitOfWork(store) if len(attempts) == 1 else InMemoryUnitOfWork(store)

    result = buy(PurchaseTicketUseCase(factory, rng=rng))

    assert result.error is None
    assert len(attempts) == 2
    assert len(store.tickets()) == 1
    assert store.boxes()[0].remaining_tickets == 499


def test_persistent_conflict_gives_up(store, rng):
    use_case = PurchaseTicketUseCase(lambda: ConflictingUnitOfWork(store), rng=rng, max_attempts=2)

    result = buy(use_case)

    assert result.error_code == "internal"
    assert store.tickets() == []


def test_concurrent_purchases_never_oversell(store):
    use_case = PurchaseTicketUseCase(lambda: InMemoryUnitOfWork(store), rng=random.Random(8))
    errors = []

    def worker(player_id):
        for _ in range(60):
            result = buy(use_case, player_id)
            if result.error:
                errors.append(result.error)

    threads = [threading.Thread(target=worker, args=(p,)) for p in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    first, second = store.boxes()
    assert first.remaining_tickets == 0 and first.total_winners_remaining == 0
    assert second.remaining_tickets == 400
    tickets = store.tickets()
    assert len({t.id for t in tickets}) == 600
    assert Counter(t.game_box_id for t in tickets) == {1: 500, 2: 100}


def test_event_published_after_commit(purchase, publisher):
    result = purchase.execute(PurchaseTicketRequest(player_id=9), {"sentry-trace": "abc"})

    [(event, headers)] = publisher.events
    assert event["ticket_id"] == result.ticket.id
    assert event["player_id"] == 9
    assert event["total_payout"] == result.ticket.total_payout
    assert headers == {"sentry-trace": "abc"}


def test_publish_failure_does_not_fail_purchase(store, rng):
    use_case = PurchaseTicketUseCase(lambda: InMemoryUnitOfWork(store), message_publisher=FailingPublisher(), rng=rng)
    assert buy(use_case).error is None
    assert len(store.tickets()) == 1


def test_unallocated_winning_grid_is_paid_from_the_pool(purchase, store, monkeypatch, caplog):
    winning = [GameSymbol.SKULL, GameSymbol.SKULL, GameSymbol.MAP] + [GameSymbol.SHIP] * 12
    monkeypatch.setattr(purchase_ticket_use_case, "should_generate_winner", lambda box, rng=None: False)
    monkeypatch.setattr(purchase_ticket_use_case, "encode_losing_grid", lambda rng=None: list(winning))

    with caplog.at_level(logging.ERROR):
        result = buy(purchase)

    assert result.ticket.total_payout == 1
    assert "pays 1 but tier 0 was allocated" in caplog.text
    [box] = store.boxes()
    assert box.winners_remaining[PrizeTier.ONE] == INITIAL_WINNER_DISTRIBUTION[PrizeTier.ONE] - 1
    assert box.total_winners_remaining == 124


def test_allocated_tier_is_consumed_even_when_grid_differs(purchase, store, monkeypatch):
    losing = [GameSymbol.MAP, GameSymbol.SHIP, GameSymbol.ANCHOR] * 5
    monkeypatch.setattr(purchase_ticket_use_case, "should_generate_winner", lambda box, rng=None: True)
    monkeypatch.setattr(purchase_ticket_use_case, "select_prize_level", lambda box, rng=None: PrizeTier.FIVE)
    monkeypatch.setattr(purchase_ticket_use_case, "encode_winning_grid", lambda tier, rng=None: list(losing))

    result = buy(purchase)

    assert result.ticket.total_payout == 0
    [box] = store.boxes()
    assert box.winners_remaining[PrizeTier.FIVE] == INITIAL_WINNER_DISTRIBUTION[PrizeTier.FIVE] - 1

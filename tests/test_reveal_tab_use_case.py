import pytest

from pulltab.application.dto import PurchaseTicketRequest, RevealTabRequest, TicketDetailsRequest
from pulltab.domain.entities.symbols import GameSymbol as S
from pulltab.domain.entities.ticket import Ticket
from pulltab.domain.services.symbol_grid import decode_winning_lines


@pytest.fixture
def ticket(purchase):
    return purchase.execute(PurchaseTicketRequest(player_id=1)).ticket


def test_reveal_returns_tab_symbols(reveal, ticket):
    result = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=2))

    assert result.error is None
    assert result.symbols == [int(s) for s in ticket.symbols[6:9]]
    assert result.win_detected == any(line.line == 3 for line in ticket.winning_lines)
    assert result.total_payout == ticket.total_payout
    body = result.to_dict()
    assert body["message"] == "Tab 3 revealed"
    assert body["ticket"]["revealedTabs"] == [False, False, True, False, False]
    assert "symbols" not in body["ticket"]


def test_reveal_is_idempotent(reveal, get_ticket, ticket):
    first = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=0))
    second = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=0))

    assert first.to_dict() == second.to_dict()
    stored = get_ticket.execute(TicketDetailsRequest(ticket_id=ticket.id, player_id=1)).ticket
    assert stored.revealed_tabs == [0]
    assert stored.total_payout == ticket.total_payout


def test_tabs_are_independent(reveal, get_ticket, ticket):
    reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=4))
    reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=1))

    stored = get_ticket.execute(TicketDetailsRequest(ticket_id=ticket.id, player_id=1)).ticket
    assert stored.revealed_state == [False, True, False, False, True]


def test_full_reveal_discloses_grid(reveal, get_ticket, ticket):
    for i in range(5):
        result = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=i))

    view = result.to_dict()["ticket"]
    assert view["isFullyRevealed"] is True
    assert view["symbols"] == [int(s) for s in ticket.symbols]
    assert view["totalPayout"] == ticket.total_payout
    details = get_ticket.execute(TicketDetailsRequest(ticket_id=ticket.id, player_id=1)).to_dict()
    assert details["ticket"]["isWinner"] == ticket.is_winner


def test_other_players_ticket_is_not_found(reveal, get_ticket, ticket):
    result = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=2, tab_index=0))

    assert result.error == "Ticket not found"
    assert result.error_code == "not_found"
    stored = get_ticket.execute(TicketDetailsRequest(ticket_id=ticket.id, player_id=1)).ticket
    assert stored.revealed_tabs == []
    assert get_ticket.execute(TicketDetailsRequest(ticket_id=ticket.id, player_id=2)).error_code == "not_found"


def test_missing_ticket(reveal):
    result = reveal.execute(RevealTabRequest(ticket_id=999, player_id=1, tab_index=0))
    assert result.error_code == "not_found"


@pytest.mark.parametrize("tab_index", [-1, 5, 17])
def test_invalid_tab_index(reveal, ticket, tab_index):
    result = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=tab_index))

    assert result.error == "Invalid tab index (must be 0-4)"
    assert result.error_code == "invalid_argument"


def test_losing_tab_does_not_disclose_payout(reveal, ticket_repository):
    symbols = [S.MAP, S.SHIP, S.ANCHOR] * 4 + [S.SKULL, S.SKULL, S.SKULL]
    ticket = ticket_repository.add(Ticket(
        player_id=1,
        game_box_id=1,
        symbols=symbols,
        winning_lines=decode_winning_lines(symbols),
        total_payout=100,
    ))

    losing = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=0))
    winning = reveal.execute(RevealTabRequest(ticket_id=ticket.id, player_id=1, tab_index=4))

    assert losing.total_payout == 100
    body = losing.to_dict()
    assert body["tab"]["winDetected"] is False
    assert "totalPayout" not in body
    assert "totalPayout" not in body["ticket"]
    assert winning.to_dict()["totalPayout"] == 100

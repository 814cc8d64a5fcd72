"""Purchase ticket use case"""
import logging
from random import Random
from typing import Callable, Dict, Optional

import sentry_sdk
from sentry_sdk import start_span

from pulltab.application.dto.purchase_ticket_request import PurchaseTicketRequest
from pulltab.application.dto.purchase_ticket_response import PurchaseTicketResponse
from pulltab.application.ports.message_publisher_port import MessagePublisherPort
from pulltab.application.ports.unit_of_work_port import UnitOfWorkPort
from pulltab.domain.entities.game_box import GameBox
from pulltab.domain.entities.symbols import PrizeTier
from pulltab.domain.entities.ticket import Ticket
from pulltab.domain.exceptions import (
    OutOfInventoryError,
    PullTabError,
    TransactionConflictError,
)
from pulltab.domain.services.allocation import select_prize_level, should_generate_winner
from pulltab.domain.services.symbol_grid import (
    calculate_payout,
    decode_winning_lines,
    encode_losing_grid,
    encode_winning_grid,
)
from pulltab.metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class PurchaseTicketUseCase:
    """Use case for selling one ticket from the active game box

    Box lookup or creation, the win decision, the ticket insert, box depletion and
    the player's statistics all happen in one unit of work. Events and metrics
    are emitted only after commit.
    """

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWorkPort],
        message_publisher: Optional[MessagePublisherPort] = None,
        rng: Optional[Random] = None,
        max_attempts: int = 3
    ):
        self.uow_factory = uow_factory
        self.message_publisher = message_publisher
        self.rng = rng
        self.max_attempts = max(1, max_attempts)

    def execute(self, request: PurchaseTicketRequest, trace_headers: Optional[Dict[str, str]] = None) -> PurchaseTicketResponse:
        """Execute ticket purchase"""
        try:
            ticket, box = self._purchase_with_retry(request.player_id)

        except PullTabError as e:
            if e.code == "internal":
                logger.error(f"Ticket purchase for player {request.player_id} failed: {e}")
                sentry_sdk.capture_exception(e)
            else:
                logger.warning(f"Ticket purchase for player {request.player_id} rejected: {e}")
            BusinessMetrics.track_failure(e.code)
            return PurchaseTicketResponse(error=str(e), error_code=e.code)

        except Exception as e:
            logger.exception(f"Unexpected error purchasing ticket for player {request.player_id}")
            sentry_sdk.capture_exception(e)
            BusinessMetrics.track_failure("internal")
            return PurchaseTicketResponse(error="Failed to purchase ticket", error_code="internal")

        BusinessMetrics.track_purchase(ticket.total_payout, box.remaining_tickets, box.is_complete)
        if box.is_complete:
            logger.info(f"Game box {box.id} sold out")
        self._publish(ticket, box, trace_headers or {})

        return PurchaseTicketResponse(ticket=ticket, box_completed=box.is_complete)

    def _purchase_with_retry(self, player_id: int):
        for attempt in range(1, self.max_attempts + 1):
            try:
                return self._purchase(player_id)
            except TransactionConflictError as e:
                if attempt == self.max_attempts:
                    raise
                logger.warning(f"Write conflict on purchase attempt {attempt}/{self.max_attempts}, retrying: {e}")

    def _purchase(self, player_id: int):
        with self.uow_factory() as uow:
            with start_span(op="db.lock", name="Lock active game box") as span:
                box = uow.game_boxes.lock_active()
                if box is None:
                    box = uow.game_boxes.add(GameBox.create_new())
                    logger.info(f"Created game box {box.id}")
                span.set_data("game_box.id", box.id)

            if not box.has_tickets_remaining():
                raise OutOfInventoryError("No tickets remaining in current game box")

            with start_span(op="game.allocate", name="Decide ticket outcome") as span:
                snapshot = box.snapshot()
                tier = None
                if should_generate_winner(snapshot, self.rng):
                    tier = select_prize_level(snapshot, self.rng)
                span.set_data("prize_tier", int(tier) if tier is not None else 0)

            with start_span(op="game.encode", name="Generate ticket symbols"):
                if tier is not None:
                    symbols = encode_winning_grid(tier, self.rng)
                else:
                    symbols = encode_losing_grid(self.rng)
                winning_lines = decode_winning_lines(symbols)
                payout = calculate_payout(winning_lines)

            intended = int(tier) if tier is not None else 0
            if payout != intended:
                # The decoded grid is what the player sees, so it stays the paid amount
                logger.error(f"Generated grid pays {payout} but tier {intended} was allocated in box {box.id}")
                sentry_sdk.capture_message(
                    f"Ticket grid payout {payout} does not match allocated tier {intended}",
                    level="error"
                )

            with start_span(op="db.insert", name="Store ticket and deplete box"):
                ticket = uow.tickets.add(Ticket(
                    player_id=player_id,
                    game_box_id=box.id,
                    symbols=symbols,
                    winning_lines=winning_lines,
                    total_payout=payout,
                ))

                box.consume_ticket_slot()
                prize_tier = tier if tier is not None else self._paid_tier(payout, box)
                if prize_tier is not None and not box.consume_prize(prize_tier):
                    logger.error(f"Prize tier {int(prize_tier)} was already exhausted in box {box.id}")
                uow.game_boxes.save(box)

                statistics = uow.statistics.get_or_create(player_id)
                statistics.record_ticket(payout)
                uow.statistics.save(statistics)

            uow.commit()

        return ticket, box

    @staticmethod
    def _paid_tier(payout: int, box: GameBox) -> Optional[PrizeTier]:
        """Tier an unallocated winning grid draws from the box's pool"""
        if payout <= 0:
            return None
        try:
            return PrizeTier(payout)
        except ValueError:
            logger.error(f"Grid payout {payout} in box {box.id} matches no prize tier")
            return None

    def _publish(self, ticket: Ticket, box: GameBox, trace_headers: Dict[str, str]) -> None:
        if not self.message_publisher:
            return
        with start_span(op="mq.publish", name="Publish ticket purchase") as mq_span:
            try:
                self.message_publisher.publish_ticket_purchased(
                    {
                        "ticket_id": ticket.id,
                        "player_id": ticket.player_id,
                        "game_box_id": ticket.game_box_id,
                        "total_payout": ticket.total_payout,
                        "is_winner": ticket.is_winner,
                        "box_completed": box.is_complete,
                        "timestamp": ticket.created_at,
                    },
                    trace_headers
                )
                mq_span.set_tag("mq.published", "true")
            except Exception as mq_error:
                logger.error(f"Failed to publish ticket purchase: {mq_error}")
                mq_span.set_tag("mq.published", "false")

"""Business metrics exported to Prometheus"""
import sentry_sdk
from prometheus_client import Counter, Gauge

TICKETS_SOLD = Counter(
    "pulltab_tickets_sold_total",
    "Tickets sold across all game boxes",
)
PAYOUT_UNITS = Counter(
    "pulltab_payout_units_total",
    "Currency units awarded to players",
)
WINNERS = Counter(
    "pulltab_winners_total",
    "Winning tickets by prize tier",
    ["tier"],
)
BOXES_COMPLETED = Counter(
    "pulltab_boxes_completed_total",
    "Game boxes sold out",
)
PURCHASE_FAILURES = Counter(
    "pulltab_purchase_failures_total",
    "Ticket purchases that were rolled back",
    ["code"],
)
BOX_REMAINING_TICKETS = Gauge(
    "pulltab_box_remaining_tickets",
    "Tickets left in the most recently sold-from game box",
)


class BusinessMetrics:
    """Thin facade over the Prometheus collectors"""

    @staticmethod
    def track_purchase(payout: int, remaining_tickets: int, box_completed: bool) -> None:
        TICKETS_SOLD.inc()
        BOX_REMAINING_TICKETS.set(remaining_tickets)
        if payout > 0:
            PAYOUT_UNITS.inc(payout)
            WINNERS.labels(tier=str(payout)).inc()
        if box_completed:
            BOXES_COMPLETED.inc()
        sentry_sdk.set_tag("game.win", str(payout > 0))

    @staticmethod
    def track_failure(code: str) -> None:
        PURCHASE_FAILURES.labels(code=code).inc()

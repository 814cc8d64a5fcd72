"""HTTP REST handlers for the pull-tab engine

Authentication happens upstream; the gateway forwards the trusted player id
in the X-Player-Id header.
"""
import json
from typing import Optional

import sentry_sdk
from tornado import web
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from pulltab.application.dto.purchase_ticket_request import PurchaseTicketRequest
from pulltab.application.dto.reveal_tab_request import RevealTabRequest
from pulltab.application.dto.ticket_details_request import TicketDetailsRequest
from pulltab.application.dto.ticket_history_request import TicketHistoryRequest
from pulltab.application.use_cases.purchase_ticket_use_case import PurchaseTicketUseCase
from pulltab.application.use_cases.reveal_tab_use_case import RevealTabUseCase
from pulltab.application.use_cases.get_ticket_use_case import GetTicketUseCase
from pulltab.application.use_cases.get_user_tickets_use_case import GetUserTicketsUseCase
from pulltab.application.use_cases.get_box_status_use_case import GetBoxStatusUseCase
from pulltab.application.use_cases.get_player_statistics_use_case import GetPlayerStatisticsUseCase

PLAYER_HEADER = "X-Player-Id"

# Ids are stored as BSON int64
MAX_TICKET_ID = 2 ** 63 - 1

STATUS_MAP = {
    "invalid_argument": 400,
    "unauthenticated": 401,
    "not_found": 404,
    "resource_exhausted": 409,
    "internal": 500
}


class HealthHandler(web.RequestHandler):
    """Health check endpoint"""

    def get(self):
        self.write({"status": "ok"})


class MetricsHandler(web.RequestHandler):
    """Prometheus metrics endpoint"""

    def get(self):
        self.set_header('Content-Type', CONTENT_TYPE_LATEST)
        self.write(generate_latest())


class ApiHandler(web.RequestHandler):
    """Shared helpers for JSON API handlers"""

    def player_id(self) -> Optional[int]:
        """Trusted player id from the gateway, None (and a 401 written) if absent"""
        raw = self.request.headers.get(PLAYER_HEADER)
        try:
            return int(raw)
        except (TypeError, ValueError):
            self.api_error("Authentication required", "unauthenticated")
            return None

    def ticket_id(self, raw: str) -> Optional[int]:
        """Ticket id from the path, None (and a 404 written) if it cannot exist"""
        ticket_id = int(raw)
        if ticket_id > MAX_TICKET_ID:
            self.api_error("Ticket not found", "not_found")
            return None
        return ticket_id

    def api_error(self, message: str, code: str):
        self.set_status(STATUS_MAP.get(code, 500))
        self.write({"error": message, "code": code})

    def write_result(self, result, status: int = 200):
        if result.error:
            self.api_error(result.error, result.error_code)
        else:
            self.set_status(status)
            self.write(result.to_dict())

    def trace_headers(self) -> dict:
        current_span = sentry_sdk.get_current_span()
        return {
            'sentry-trace': current_span.to_traceparent() if current_span else '',
            'baggage': sentry_sdk.get_baggage() or ''
        }


class PurchaseTicketHandler(ApiHandler):
    """POST /api/tickets/purchase"""

    def initialize(self, purchase_use_case: PurchaseTicketUseCase):
        self.purchase_use_case = purchase_use_case

    async def post(self):
        transaction = sentry_sdk.continue_trace({
            "sentry-trace": self.request.headers.get("sentry-trace"),
            "baggage": self.request.headers.get("baggage")
        }, op="ticket.purchase", name="purchase_ticket")

        with sentry_sdk.start_transaction(transaction):
            player_id = self.player_id()
            if player_id is None:
                return
            sentry_sdk.set_user({"id": str(player_id)})

            result = self.purchase_use_case.execute(
                PurchaseTicketRequest(player_id=player_id),
                self.trace_headers()
            )
            self.write_result(result, status=201)


class TicketHistoryHandler(ApiHandler):
    """GET /api/tickets?limit=&offset="""

    def initialize(self, history_use_case: GetUserTicketsUseCase):
        self.history_use_case = history_use_case

    def get(self):
        player_id = self.player_id()
        if player_id is None:
            return
        try:
            limit = int(self.get_query_argument("limit", "10"))
            offset = int(self.get_query_argument("offset", "0"))
        except ValueError:
            return self.api_error("limit and offset must be integers", "invalid_argument")

        result = self.history_use_case.execute(
            TicketHistoryRequest(player_id=player_id, limit=limit, offset=offset)
        )
        self.write_result(result)


class TicketHandler(ApiHandler):
    """GET /api/tickets/<id>"""

    def initialize(self, ticket_use_case: GetTicketUseCase):
        self.ticket_use_case = ticket_use_case

    def get(self, ticket_id):
        player_id = self.player_id()
        if player_id is None:
            return
        ticket_id = self.ticket_id(ticket_id)
        if ticket_id is None:
            return
        result = self.ticket_use_case.execute(
            TicketDetailsRequest(ticket_id=ticket_id, player_id=player_id)
        )
        self.write_result(result)


class RevealTabHandler(ApiHandler):
    """POST /api/tickets/<id>/reveal with {"tabIndex": 0-4}"""

    def initialize(self, reveal_use_case: RevealTabUseCase):
        self.reveal_use_case = reveal_use_case

    def post(self, ticket_id):
        player_id = self.player_id()
        if player_id is None:
            return
        ticket_id = self.ticket_id(ticket_id)
        if ticket_id is None:
            return
        try:
            data = json.loads(self.request.body or b"{}")
        except json.JSONDecodeError:
            return self.api_error("Request body must be JSON", "invalid_argument")

        tab_index = data.get("tabIndex") if isinstance(data, dict) else None
        if isinstance(tab_index, bool) or not isinstance(tab_index, int):
            return self.api_error("Invalid tab index (must be 0-4)", "invalid_argument")

        result = self.reveal_use_case.execute(
            RevealTabRequest(ticket_id=ticket_id, player_id=player_id, tab_index=tab_index)
        )
        self.write_result(result)


class CurrentGameBoxHandler(ApiHandler):
    """GET /api/gamebox/current (public)"""

    def initialize(self, box_status_use_case: GetBoxStatusUseCase):
        self.box_status_use_case = box_status_use_case

    def get(self):
        self.write_result(self.box_status_use_case.execute())


class PlayerStatisticsHandler(ApiHandler):
    """GET /api/stats"""

    def initialize(self, statistics_use_case: GetPlayerStatisticsUseCase):
        self.statistics_use_case = statistics_use_case

    def get(self):
        player_id = self.player_id()
        if player_id is None:
            return
        self.write_result(self.statistics_use_case.execute(player_id))

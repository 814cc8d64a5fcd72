"""
Pull-Tab Engine - Clean Architecture Entry Point

Serves the ticket purchase, reveal and query endpoints over HTTP REST.
"""
import os
import logging

import sentry_sdk
from tornado import web, ioloop
from sentry_sdk.integrations.tornado import TornadoIntegration

from pulltab.config.container import Container
from pulltab.presentation.http import (
    HealthHandler,
    MetricsHandler,
    PurchaseTicketHandler,
    TicketHistoryHandler,
    TicketHandler,
    RevealTabHandler,
    CurrentGameBoxHandler,
    PlayerStatisticsHandler
)

logger = logging.getLogger(__name__)


def init_sentry():
    """Initialize Sentry from the SENTRY_* environment"""
    version = os.environ.get('APP_VERSION', '1.0.0')
    sentry_sdk.init(
        dsn=os.environ.get('SENTRY_DSN'),
        integrations=[TornadoIntegration()],
        traces_sample_rate=float(os.environ.get('SENTRY_TRACES_SAMPLE_RATE', '1.0')),
        environment=os.environ.get('SENTRY_ENVIRONMENT', 'development'),
        profiles_sample_rate=float(os.environ.get('SENTRY_PROFILES_SAMPLE_RATE', '0')),
        debug=os.environ.get('SENTRY_DEBUG', 'false').lower() == 'true',
        release=f"pulltab-engine@{version}",
        auto_session_tracking=True
    )


def make_app(container=None):
    """Create Tornado application with Clean Architecture handlers"""
    container = container or Container.get_instance()

    routes = [
        (r"/health", HealthHandler),
        (r"/metrics", MetricsHandler),
        (r"/api/tickets/purchase", PurchaseTicketHandler, {
            "purchase_use_case": container.get_purchase_use_case()
        }),
        (r"/api/tickets", TicketHistoryHandler, {
            "history_use_case": container.get_history_use_case()
        }),
        (r"/api/tickets/(\d+)", TicketHandler, {
            "ticket_use_case": container.get_ticket_use_case()
        }),
        (r"/api/tickets/(\d+)/reveal", RevealTabHandler, {
            "reveal_use_case": container.get_reveal_use_case()
        }),
        (r"/api/gamebox/current", CurrentGameBoxHandler, {
            "box_status_use_case": container.get_box_status_use_case()
        }),
        (r"/api/stats", PlayerStatisticsHandler, {
            "statistics_use_case": container.get_statistics_use_case()
        }),
    ]

    return web.Application(routes)


def main():
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())
    init_sentry()

    app = make_app()
    port = int(os.environ.get('PORT', 8082))
    app.listen(port)

    logger.info(f"Pull-tab engine started on :{port}")
    ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()

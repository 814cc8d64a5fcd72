"""Current game box status use case"""
import logging

import sentry_sdk

from pulltab.application.dto.box_status_response import BoxStatusResponse
from pulltab.application.ports.game_box_repository_port import GameBoxRepositoryPort
from pulltab.domain.entities.game_box import GameBox

logger = logging.getLogger(__name__)


class GetBoxStatusUseCase:
    """Read-only statistics of the box new purchases will draw from"""

    def __init__(self, game_box_repository: GameBoxRepositoryPort):
        self.game_box_repository = game_box_repository

    def execute(self) -> BoxStatusResponse:
        try:
            box = self.game_box_repository.get_current()
            if box is None:
                # Nothing sold yet: report the box the first purchase will create
                box = GameBox.create_new()
            return BoxStatusResponse(box=box)

        except Exception as e:
            logger.exception("Unexpected error fetching game box status")
            sentry_sdk.capture_exception(e)
            return BoxStatusResponse(error="Failed to fetch game box status", error_code="internal")

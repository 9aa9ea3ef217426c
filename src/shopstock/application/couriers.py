"""Application services for the courier roster: register, (de)activate, list."""

from __future__ import annotations

import logging

from shopstock.application.dto import CourierDTO, courier_to_dto
from shopstock.domain.exceptions import CourierNotFoundError, ValidationError
from shopstock.domain.model.courier import Courier
from shopstock.domain.repository.courier_repository import CourierRepository

logger = logging.getLogger(__name__)


class AddCourierHandler:

    def __init__(self, courier_repo: CourierRepository) -> None:
        self._courier_repo = courier_repo

    async def handle(self, courier_id: int, tg_id: int, name: str = "Courier") -> CourierDTO:
        courier = Courier.create(courier_id, tg_id, name)
        # Both ids must stay unambiguous across the whole roster
        for any_id in courier.ids:
            if await self._courier_repo.find(any_id) is not None:
                raise ValidationError(f"Courier id {any_id} is already registered")
        await self._courier_repo.save(courier)
        logger.info("Courier #%s registered (tg %s)", courier.courier_id, courier.tg_id)
        return courier_to_dto(courier)


class SetCourierActiveHandler:

    def __init__(self, courier_repo: CourierRepository) -> None:
        self._courier_repo = courier_repo

    async def handle(self, courier_id: int, active: bool) -> None:
        courier = await self._courier_repo.find(courier_id)
        if courier is None:
            raise CourierNotFoundError(courier_id)
        if active:
            courier.activate()
        else:
            courier.deactivate()
        await self._courier_repo.save(courier)


class ListActiveCouriersHandler:

    def __init__(self, courier_repo: CourierRepository) -> None:
        self._courier_repo = courier_repo

    async def handle(self) -> list[CourierDTO]:
        return [courier_to_dto(c) for c in await self._courier_repo.list_active()]

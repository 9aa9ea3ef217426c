"""Unit tests for courier roster entries."""

import pytest

from shopstock.domain.exceptions import ValidationError
from shopstock.domain.model.courier import Courier


class TestCourier:

    def test_create(self):
        courier = Courier.create(7, 7007, " Artem ")
        assert courier.name == "Artem"
        assert courier.active
        assert courier.ids == (7, 7007)

    @pytest.mark.parametrize("courier_id, tg_id", [(0, 7007), (7, -1)])
    def test_ids_must_be_positive(self, courier_id, tg_id):
        with pytest.raises(ValidationError, match="positive"):
            Courier.create(courier_id, tg_id)

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Courier.create(7, 7007, "  ")

    def test_deactivate_and_activate(self):
        courier = Courier.create(7, 7007)
        courier.deactivate()
        assert not courier.active
        courier.activate()
        assert courier.active

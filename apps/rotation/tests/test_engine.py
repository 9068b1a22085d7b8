from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from apps.rotation.engine import (
    NO_PARTICIPANTS_MESSAGE,
    LastPurchase,
    compute_next_buyer,
    plan_out_of_order_rotation,
)


def roster(*ids):
    return [SimpleNamespace(id=pid, name=f'P{pid}') for pid in ids]


def bought(participant_id):
    return LastPurchase(
        participant_id=participant_id,
        name=f'P{participant_id}',
        purchase_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestComputeNextBuyer:

    def test_empty_roster(self):
        view = compute_next_buyer([])

        assert view.next_buyer is None
        assert view.message == NO_PARTICIPANTS_MESSAGE

    def test_no_purchases_picks_head(self):
        view = compute_next_buyer(roster(3, 1, 2))

        assert view.next_buyer.id == 3
        assert view.last_purchase is None
        assert view.message is None

    def test_follows_last_buyer(self):
        view = compute_next_buyer(roster(1, 2, 3), bought(2))

        assert view.next_buyer.id == 3
        assert view.last_purchase.participant_id == 2

    def test_wraps_around(self):
        assert compute_next_buyer(roster(1, 2, 3), bought(3)).next_buyer.id == 1

    def test_single_participant_always_next(self):
        assert compute_next_buyer(roster(7), bought(7)).next_buyer.id == 7

    def test_uses_current_order_not_insertion_order(self):
        assert compute_next_buyer(roster(3, 1, 2), bought(1)).next_buyer.id == 2

    def test_departed_last_buyer_restarts_at_head(self):
        assert compute_next_buyer(roster(1, 2, 3), bought(99)).next_buyer.id == 1

    def test_deterministic(self):
        participants = roster(1, 2, 3)
        first = compute_next_buyer(participants, bought(1))
        second = compute_next_buyer(participants, bought(1))

        assert first == second


class TestPlanOutOfOrderRotation:

    def test_skipped_first_buyer_last(self):
        assert plan_out_of_order_rotation([1, 2, 3, 4], buyer_id=4, skipped_id=2) == [2, 1, 3, 4]

    def test_skipped_was_head(self):
        assert plan_out_of_order_rotation([1, 2, 3], buyer_id=2, skipped_id=1) == [1, 3, 2]

    def test_without_skipped_buyer_moves_to_back(self):
        assert plan_out_of_order_rotation([1, 2, 3], buyer_id=1) == [2, 3, 1]

    def test_skipped_equal_to_buyer(self):
        assert plan_out_of_order_rotation([1, 2, 3], buyer_id=2, skipped_id=2) == [1, 3, 2]

    def test_skipped_not_on_roster_ignored(self):
        assert plan_out_of_order_rotation([1, 2, 3], buyer_id=3, skipped_id=42) == [1, 2, 3]

    @pytest.mark.parametrize('current,buyer,skipped', [
        ([1, 2, 3, 4, 5], 3, 5),
        ([5, 4, 3, 2, 1], 1, 4),
        ([10, 20], 10, 20),
    ])
    def test_result_is_permutation(self, current, buyer, skipped):
        result = plan_out_of_order_rotation(current, buyer_id=buyer, skipped_id=skipped)

        assert sorted(result) == sorted(current)
        assert result[0] == skipped
        assert result[-1] == buyer

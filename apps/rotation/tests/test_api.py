import pytest
from unittest import mock
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status

from apps.participants.models import Participant, ReorderHistoryEntry
from apps.participants.services import ReorderFailedError
from apps.purchases.models import CoffeePurchase, ExternalPurchase
from apps.purchases.services import PurchaseLedgerService


def names(participants):
    return [p['name'] for p in participants]


@pytest.mark.django_db
class TestNextBuyer:
    """Tests for GET /api/next-buyer"""

    def test_empty_roster(self, api_client):
        response = api_client.get(reverse('rotation:next-buyer'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'next_buyer': None, 'message': 'No participants found'}

    def test_no_purchases_picks_first(self, api_client, roster):
        response = api_client.get(reverse('rotation:next-buyer'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['next_buyer']['name'] == 'Alice'
        assert response.data['last_purchase'] is None
        assert 'message' not in response.data

    def test_full_cycle(self, api_client, roster):
        purchases_url = reverse('purchases:purchase-list')
        next_url = reverse('rotation:next-buyer')

        seen = []
        for _ in range(4):
            buyer = api_client.get(next_url).data['next_buyer']
            seen.append(buyer['name'])
            api_client.post(purchases_url, {'participant_id': buyer['id']}, format='json')

        assert seen == ['Alice', 'Bob', 'Carol', 'Alice']

    def test_external_purchase_does_not_advance(self, api_client, roster):
        alice = roster[0]
        CoffeePurchase.objects.create(participant=alice)
        ExternalPurchase.objects.create(name='Guest')

        response = api_client.get(reverse('rotation:next-buyer'))

        assert response.data['next_buyer']['name'] == 'Bob'
        assert response.data['last_purchase']['participant_id'] == alice.id
        assert response.data['last_purchase']['name'] == 'Alice'

    def test_follows_reordered_rotation(self, api_client, roster):
        alice, bob, carol = roster
        CoffeePurchase.objects.create(participant=alice)
        api_client.put(
            reverse('participants:participant-reorder'),
            {'participantIds': [bob.id, alice.id, carol.id]},
            format='json',
        )

        response = api_client.get(reverse('rotation:next-buyer'))

        assert response.data['next_buyer']['name'] == 'Carol'


@pytest.mark.django_db
class TestOutOfOrderPurchase:
    """Tests for POST /api/purchases/out-of-order"""

    def test_participant_out_of_turn(self, api_client, roster):
        alice, bob, carol = roster
        CoffeePurchase.objects.create(participant=alice)  # Bob is next

        url = reverse('rotation:out-of-order-purchase')
        response = api_client.post(url, {'participant_id': carol.id}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['reordered'] is True
        assert response.data['purchase']['participant_id'] == carol.id
        assert names(response.data['participants']) == ['Bob', 'Alice', 'Carol']
        assert response.data['next_buyer']['next_buyer']['name'] == 'Bob'

        entry = ReorderHistoryEntry.objects.get()
        assert entry.old_order == [alice.id, bob.id, carol.id]
        assert entry.new_order == [bob.id, alice.id, carol.id]

    def test_explicit_current_next_buyer(self, api_client, roster):
        alice, bob, carol = roster

        url = reverse('rotation:out-of-order-purchase')
        response = api_client.post(
            url,
            {'participant_id': alice.id, 'current_next_buyer_id': carol.id},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert names(response.data['participants']) == ['Carol', 'Bob', 'Alice']

    def test_external_buyer_leaves_rotation_alone(self, api_client, roster):
        url = reverse('rotation:out-of-order-purchase')
        response = api_client.post(url, {'buyer_name': 'Guest'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['reordered'] is False
        assert response.data['purchase']['is_external'] is True
        assert names(response.data['participants']) == ['Alice', 'Bob', 'Carol']
        assert not ReorderHistoryEntry.objects.exists()

    def test_neither_field(self, api_client, roster):
        url = reverse('rotation:out-of-order-purchase')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Either participant_id or buyer_name is required'}

    def test_unknown_participant(self, api_client, roster):
        url = reverse('rotation:out-of-order-purchase')
        response = api_client.post(url, {'participant_id': 999}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert not CoffeePurchase.objects.exists()

    def test_reorder_failure_rolls_back_purchase(self, api_client, roster):
        carol = roster[2]
        url = reverse('rotation:out-of-order-purchase')

        with mock.patch(
            'apps.rotation.services.reconciliation.reorder_participants',
            side_effect=ReorderFailedError(),
        ):
            response = api_client.post(url, {'participant_id': carol.id}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['phase'] == 'reorder'
        assert not CoffeePurchase.objects.exists()
        assert list(
            Participant.objects.order_by('order_position').values_list('name', flat=True)
        ) == ['Alice', 'Bob', 'Carol']

    def test_purchase_failure_reports_phase(self, api_client, roster):
        carol = roster[2]
        url = reverse('rotation:out-of-order-purchase')

        with mock.patch.object(
            PurchaseLedgerService,
            'record_participant_purchase',
            side_effect=DatabaseError('insert failed'),
        ):
            response = api_client.post(url, {'participant_id': carol.id}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['phase'] == 'purchase'
        assert not CoffeePurchase.objects.exists()
        assert not ReorderHistoryEntry.objects.exists()
        assert list(
            Participant.objects.order_by('order_position').values_list('name', flat=True)
        ) == ['Alice', 'Bob', 'Carol']

import pytest
from datetime import timedelta
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.purchases.models import CoffeePurchase, ExternalPurchase


@pytest.mark.django_db
class TestPurchaseList:
    """Tests for GET /api/purchases"""

    def test_unified_history(self, api_client, alice):
        now = timezone.now()
        coffee = CoffeePurchase.objects.create(participant=alice, purchase_date=now - timedelta(hours=1))
        external = ExternalPurchase.objects.create(name='Guest', purchase_date=now)

        response = api_client.get(reverse('purchases:purchase-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2
        assert response.data[0]['id'] == external.id
        assert response.data[0]['is_external'] is True
        assert 'participant_id' not in response.data[0]
        assert response.data[1]['id'] == coffee.id
        assert response.data[1]['participant_id'] == alice.id
        assert response.data[1]['name'] == 'Alice'


@pytest.mark.django_db
class TestPurchaseCreate:
    """Tests for POST /api/purchases"""

    def test_record_participant_purchase(self, api_client, alice):
        url = reverse('purchases:purchase-list')
        response = api_client.post(url, {'participant_id': alice.id}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['participant_id'] == alice.id
        assert response.data['is_external'] is False
        assert CoffeePurchase.objects.count() == 1

    def test_record_external_purchase(self, api_client, db):
        url = reverse('purchases:purchase-list')
        response = api_client.post(url, {'buyer_name': 'Guest'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Guest'
        assert response.data['is_external'] is True

    def test_neither_field(self, api_client, db):
        url = reverse('purchases:purchase-list')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Either participant_id or buyer_name is required'}

    def test_unknown_participant(self, api_client, db):
        url = reverse('purchases:purchase-list')
        response = api_client.post(url, {'participant_id': 999}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Participant not found'}

    def test_idempotent_retry_records_once(self, api_client, alice):
        url = reverse('purchases:purchase-list')
        first = api_client.post(
            url, {'participant_id': alice.id}, format='json', HTTP_IDEMPOTENCY_KEY='buy-1'
        )
        retry = api_client.post(
            url, {'participant_id': alice.id}, format='json', HTTP_IDEMPOTENCY_KEY='buy-1'
        )

        assert first.status_code == status.HTTP_201_CREATED
        assert retry.status_code == status.HTTP_201_CREATED
        assert retry['Idempotent-Replayed'] == 'true'
        assert retry.data['id'] == first.data['id']
        assert CoffeePurchase.objects.count() == 1


@pytest.mark.django_db
class TestPurchaseDelete:
    """Tests for DELETE /api/purchases and /api/purchases/{id}"""

    def test_delete_coffee_purchase(self, api_client, alice):
        purchase = CoffeePurchase.objects.create(participant=alice)

        url = reverse('purchases:purchase-detail', args=[purchase.id])
        response = api_client.delete(f'{url}?type=coffee')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'Coffee purchase deleted successfully'}

    def test_delete_external_purchase(self, api_client, db):
        purchase = ExternalPurchase.objects.create(name='Guest')

        url = reverse('purchases:purchase-detail', args=[purchase.id])
        response = api_client.delete(f'{url}?type=external')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'External purchase deleted successfully'}

    def test_delete_without_type(self, api_client, alice):
        purchase = CoffeePurchase.objects.create(participant=alice)

        url = reverse('purchases:purchase-detail', args=[purchase.id])
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {
            'error': 'Invalid purchase type specified. Must be "coffee" or "external".'
        }
        assert CoffeePurchase.objects.exists()

    def test_delete_missing(self, api_client, db):
        url = reverse('purchases:purchase-detail', args=[999])
        response = api_client.delete(f'{url}?type=coffee')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Coffee purchase not found'}

    def test_clear_all(self, api_client, alice):
        CoffeePurchase.objects.create(participant=alice)
        ExternalPurchase.objects.create(name='Guest')

        response = api_client.delete(reverse('purchases:purchase-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'message': 'All purchase history (regular and external) deleted successfully',
            'deletedCount': 2,
        }
        assert not CoffeePurchase.objects.exists()
        assert not ExternalPurchase.objects.exists()

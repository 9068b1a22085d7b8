import pytest
from rest_framework.test import APIClient
from apps.participants.models import Participant


@pytest.fixture
def api_client():
    """Return an API client. The API has no per-user authentication."""
    return APIClient()


@pytest.fixture
def alice(db):
    return Participant.objects.create(name='Alice', order_position=1)


@pytest.fixture
def bob(db):
    return Participant.objects.create(name='Bob', order_position=2)


@pytest.fixture
def carol(db):
    return Participant.objects.create(name='Carol', order_position=3)


@pytest.fixture
def roster(alice, bob, carol):
    """Three participants in rotation order Alice, Bob, Carol."""
    return [alice, bob, carol]

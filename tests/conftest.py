import copy
import json
from unittest.mock import MagicMock

import pytest

from coc_players.client import HTTPClient
from coc_players.config import NameCatalog


PLAYER_DOCUMENT = {
    'tag': '#ABC123',
    'name': 'Ash',
    'expLevel': 150,
    'townHallLevel': 13,
    'builderHallLevel': 8,
    'trophies': 3120,
    'bestTrophies': 4010,
    'versusTrophies': 2800,
    'bestVersusTrophies': 3050,
    'versusBattleWinCount': 412,
    'attackWins': 57,
    'defenseWins': 3,
    'role': 'coLeader',
    'donations': 1200,
    'donationsReceived': 980,
    'clan': {
        'tag': '#CLAN99',
        'name': 'Night Owls',
        'clanLevel': 17,
        'badgeUrls': {
            'small': 'https://api-assets.clashofclans.com/badges/70/abc.png',
            'medium': 'https://api-assets.clashofclans.com/badges/200/abc.png',
            'large': 'https://api-assets.clashofclans.com/badges/512/abc.png',
        },
    },
    'troops': [
        {'name': 'Barbarian', 'level': 8, 'maxLevel': 9, 'village': 'home'},
        {'name': 'Archer', 'level': 8, 'maxLevel': 9, 'village': 'home'},
        {'name': 'Giant', 'level': 7, 'maxLevel': 9, 'village': 'home'},
        {'name': 'Raged Barbarian', 'level': 14, 'maxLevel': 18, 'village': 'builderBase'},
    ],
    'spells': [
        {'name': 'Lightning Spell', 'level': 7, 'maxLevel': 9, 'village': 'home'},
    ],
    'heroes': [
        {'name': 'Barbarian King', 'level': 60, 'maxLevel': 65, 'village': 'home'},
        {'name': 'Battle Machine', 'level': 25, 'maxLevel': 30, 'village': 'builderBase'},
    ],
}


@pytest.fixture
def player_document():
    return copy.deepcopy(PLAYER_DOCUMENT)


@pytest.fixture
def catalog():
    return NameCatalog(categories={
        'troops': {
            'home': ['Barbarian', 'Archer', 'Giant', 'Wizard', 'Baby Dragon'],
            'builderBase': ['Raged Barbarian', 'Night Witch', 'Baby Dragon'],
        },
        'spells': {
            'home': ['Lightning Spell', 'Rage Spell'],
        },
        'heroes': {
            'home': ['Barbarian King', 'Archer Queen'],
            'builderBase': ['Battle Machine'],
        },
    })


def _make_response(status_code=200, json_body=None, text=None):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if json_body is None:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        response.text = text if text is not None else ''
    else:
        response.json.return_value = json_body
        response.text = text if text is not None else json.dumps(json_body)
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def mock_session():
    return MagicMock()


@pytest.fixture
def http_client(mock_session):
    return HTTPClient('T', session=mock_session)

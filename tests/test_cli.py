import pytest
from click.testing import CliRunner

from coc_players.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def api(monkeypatch, mock_session):
    monkeypatch.delenv('COC_API_BASE_URL', raising=False)
    monkeypatch.setattr('coc_players.client.requests.Session', lambda: mock_session)
    return mock_session


def test_player_summary(runner, api, make_response, player_document):
    api.get.return_value = make_response(200, player_document)

    result = runner.invoke(cli, ['--token', 'T', 'player', '#ABC123'])

    assert result.exit_code == 0, result.output
    assert 'Ash (#ABC123)' in result.output
    assert 'Town hall: 13' in result.output
    assert 'Night Owls' in result.output
    assert 'Troops unlocked: 4' in result.output
    assert api.get.call_args.kwargs['headers']['Authorization'] == 'Bearer T'


def test_player_token_from_environment(runner, api, make_response, player_document):
    api.get.return_value = make_response(200, player_document)

    result = runner.invoke(cli, ['player', 'ABC123'], env={'COC_API_TOKEN': 'env-token'})

    assert result.exit_code == 0, result.output
    assert api.get.call_args.kwargs['headers']['Authorization'] == 'Bearer env-token'


def test_player_not_found(runner, api, make_response):
    api.get.return_value = make_response(404, {'reason': 'notFound', 'message': 'Not found'})

    result = runner.invoke(cli, ['--token', 'T', 'player', '#NOPE'])

    assert result.exit_code == 1
    assert '❌ Error' in result.output
    assert 'notFound' in result.output


def test_unit(runner, api, make_response, player_document):
    api.get.return_value = make_response(200, player_document)

    result = runner.invoke(cli, ['--token', 'T', 'unit', '#ABC123', 'troops', 'Barbarian'])

    assert result.exit_code == 0, result.output
    assert 'Barbarian: level 8/9 (home)' in result.output


def test_unit_village_option(runner, api, make_response, player_document):
    player_document['troops'] += [
        {'name': 'Baby Dragon', 'level': 5, 'maxLevel': 9, 'village': 'home'},
        {'name': 'Baby Dragon', 'level': 18, 'maxLevel': 20, 'village': 'builderBase'},
    ]
    api.get.return_value = make_response(200, player_document)

    result = runner.invoke(
        cli, ['--token', 'T', 'unit', '#ABC123', 'troops', 'Baby Dragon', '--village', 'builderBase']
    )

    assert result.exit_code == 0, result.output
    assert 'Baby Dragon: level 18/20 (builderBase)' in result.output


def test_unit_not_unlocked(runner, api, make_response, player_document):
    api.get.return_value = make_response(200, player_document)

    result = runner.invoke(cli, ['--token', 'T', 'unit', '#ABC123', 'heroes', 'Archer Queen'])

    assert result.exit_code == 1
    assert 'not yet unlocked by the player Ash' in result.output


def test_catalog_categories(runner):
    result = runner.invoke(cli, ['catalog'])

    assert result.exit_code == 0
    assert 'troops' in result.output
    assert 'heroes' in result.output


def test_catalog_village(runner):
    result = runner.invoke(cli, ['catalog', 'heroes', '--village', 'builderBase'])

    assert result.exit_code == 0
    assert 'Battle Machine' in result.output
    assert 'Archer Queen' not in result.output


def test_catalog_unknown_category(runner):
    result = runner.invoke(cli, ['catalog', 'buildings'])

    assert result.exit_code == 1
    assert "Unknown category 'buildings'" in result.output

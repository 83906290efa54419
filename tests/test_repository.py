"""End-to-end queries against the canonical tennis club dataset."""

from datetime import date
from decimal import Decimal

import pytest

from tests.helpers import payment_nos, player_names, player_nos

pytestmark = pytest.mark.asyncio


async def test_players_living_in_town(repo):
    results = await repo.get_players_living_in_town("Eltham")
    assert len(results) == 2
    assert set(player_names(results)) >= {"Collins", "Moorman"}
    assert all(p.town == "Eltham" for p in results)


async def test_players_living_in_unknown_town(repo):
    assert await repo.get_players_living_in_town("Washington") == []


async def test_players_living_in_town_is_case_sensitive(repo):
    assert await repo.get_players_living_in_town("eltham") == []


async def test_players_living_in_empty_town_name(repo):
    assert await repo.get_players_living_in_town("") == []


async def test_players_living_in_towns(repo):
    results = await repo.get_players_living_in_towns(["Eltham", "Plymouth"])
    assert len(results) == 3
    assert set(player_names(results)) >= {"Collins", "Moorman", "Bailey"}


async def test_players_living_in_no_towns(repo):
    assert await repo.get_players_living_in_towns([]) == []


async def test_players_living_in_towns_without_players(repo):
    assert await repo.get_players_living_in_towns(["London", "Paris", "Tokyo"]) == []


async def test_players_living_in_duplicated_towns(repo):
    results = await repo.get_players_living_in_towns(["Eltham", "Eltham", "Plymouth"])
    assert sorted(player_nos(results)) == [27, 104, 112]


async def test_male_players_born_before(repo):
    results = await repo.get_players_with_gender_and_age(False, 1960)
    assert len(results) == 3
    assert set(player_names(results)) >= {"Bishop", "Everett", "Hope"}


async def test_female_players_born_before(repo):
    results = await repo.get_players_with_gender_and_age(True, 1970)
    assert len(results) == 4
    assert set(player_nos(results)) == {27, 112, 8, 28}


async def test_born_before_year_is_exclusive(repo):
    # Moorman (104) was born in 1970
    results = await repo.get_players_with_gender_and_age(True, 1970)
    assert 104 not in player_nos(results)
    results = await repo.get_players_with_gender_and_age(True, 1971)
    assert 104 in player_nos(results)


async def test_penalties_in_date_range(repo):
    results = await repo.get_penalties_in_date_range(date(1981, 6, 1), date(1983, 9, 10))
    assert len(results) == 2
    assert set(payment_nos(results)) == {3, 7}


async def test_penalties_in_date_range_includes_start(repo):
    results = await repo.get_penalties_in_date_range(date(1980, 12, 8), date(1980, 12, 8))
    assert set(payment_nos(results)) == {1, 5, 6}


async def test_penalties_in_inverted_date_range(repo):
    assert await repo.get_penalties_in_date_range(date(1983, 9, 10), date(1981, 6, 1)) == []


async def test_penalties_with_amount_higher_equal_than(repo):
    results = await repo.get_penalties_with_amount_higher_equal_than(Decimal(50))
    assert len(results) == 5
    assert set(payment_nos(results)) == {1, 2, 3, 4, 8}


async def test_penalties_with_amount_uses_value_comparison(repo):
    results = await repo.get_penalties_with_amount_higher_equal_than(Decimal("100.000"))
    assert set(payment_nos(results)) == {1, 3}


async def test_average_penalty_amount(repo):
    result = await repo.get_average_penalty_amount()
    assert result == pytest.approx(60.0)


async def test_min_max_penalty_amount(repo):
    result = await repo.get_min_max_penalty_amount()
    assert result.min_amount == Decimal(25)
    assert result.max_amount == Decimal(100)


async def test_players_with_penalties(repo):
    results = await repo.get_players_with_penalties(True)
    assert len(results) == 5
    assert set(player_nos(results)) == {6, 44, 27, 104, 8}


async def test_players_without_penalties(repo):
    results = await repo.get_players_with_penalties(False)
    assert len(results) == 9
    assert set(player_nos(results)) == {83, 2, 7, 57, 39, 112, 100, 28, 95}


async def test_towns_with_seven_players(repo):
    assert await repo.get_towns_with_player_number(7) == ["Stratford"]


async def test_towns_with_two_players(repo):
    results = await repo.get_towns_with_player_number(2)
    assert len(results) == 3
    assert set(results) == {"Stratford", "Inglewood", "Eltham"}


async def test_towns_with_ten_players(repo):
    assert await repo.get_towns_with_player_number(10) == []


async def test_player_counts_by_gender(repo):
    result = await repo.get_player_counts_by_gender()
    assert result == {'F': 5, 'M': 9}


async def test_penalties_for_all_players(repo):
    sums = {
        104: Decimal(50),
        6: Decimal(100),
        27: Decimal(175),
        8: Decimal(25),
        44: Decimal(130),
    }

    results = await repo.get_penalties_for_all_players()
    assert len(results) == 14
    for pp in results:
        assert isinstance(pp.penalty_sum, Decimal)
        assert pp.penalty_sum == sums.get(pp.player.player_no, Decimal(0))


async def test_returned_players_carry_their_penalties(repo):
    results = await repo.get_players_living_in_town("Inglewood")
    penalties = {p.player_no: sorted(payment_nos(p.penalties)) for p in results}
    assert penalties == {44: [2, 5, 7], 8: [6]}


async def test_returned_penalties_resolve_their_player(repo):
    results = await repo.get_penalties_with_amount_higher_equal_than(Decimal(100))
    assert {p.player.name for p in results} == {"Parmenter", "Collins"}

from datetime import date, timedelta

import pytest

from cinema.domain.enums import RoleName

from conftest import verified_user_headers, add_movie


pytestmark = pytest.mark.anyio("asyncio")


@pytest.fixture
def catalog(db):
    return {
        "heat": add_movie(db, "Heat", "Michael Mann", 8.3, ["Crime", "Drama"], date(1995, 12, 15), 170),
        "collateral": add_movie(db, "Collateral", "Michael Mann", 7.5, ["Crime", "Thriller"], date(2004, 8, 6), 120),
        "alien": add_movie(db, "Alien", "Ridley Scott", 8.5, ["Horror", "Sci-Fi"], date(1979, 5, 25), 117, featured=True),
        "gladiator": add_movie(db, "Gladiator", "Ridley Scott", 8.5, ["Action", "Drama"], date(2000, 5, 5), 155, featured=True),
    }


async def search(client, **body):
    resp = await client.post("/api/movies/search", json=body)
    assert resp.status_code == 200, resp.text
    return resp.json()


async def test_list_and_get(api_client, catalog):
    resp = await api_client.get("/api/movies")
    assert [m["title"] for m in resp.json()] == ["Heat", "Collateral", "Alien", "Gladiator"]

    resp = await api_client.get(f"/api/movies/{catalog['alien']}")
    assert resp.status_code == 200
    assert resp.json()["genres"] == ["Horror", "Sci-Fi"]

    resp = await api_client.get("/api/movies/999")
    assert resp.status_code == 404


async def test_search_defaults_sort_by_title(api_client, catalog):
    page = await search(api_client)
    assert [m["title"] for m in page["items"]] == ["Alien", "Collateral", "Gladiator", "Heat"]
    assert page["total"] == 4
    assert page["page"] == 0
    assert page["size"] == 10
    assert page["total_pages"] == 1


async def test_search_filters(api_client, catalog):
    by_title = await search(api_client, title="AL")
    assert {m["title"] for m in by_title["items"]} == {"Alien", "Collateral"}

    by_director = await search(api_client, director="mann")
    assert by_director["total"] == 2

    featured = await search(api_client, featured=True)
    assert {m["title"] for m in featured["items"]} == {"Alien", "Gladiator"}

    rated = await search(api_client, min_rating=8.5)
    assert {m["title"] for m in rated["items"]} == {"Alien", "Gladiator"}

    nineties = await search(api_client, release_year_start="1990-01-01", release_year_end="1999-12-31")
    assert [m["title"] for m in nineties["items"]] == ["Heat"]


async def test_genre_filter_returns_each_movie_once(api_client, catalog):
    # "r" occurs in several genres of the same movie
    page = await search(api_client, genre="r")
    titles = [m["title"] for m in page["items"]]
    assert len(titles) == len(set(titles))
    assert page["total"] == len(titles)

    drama = await search(api_client, genre="DRAMA")
    assert {m["title"] for m in drama["items"]} == {"Heat", "Gladiator"}


async def test_search_pagination_and_sorting(api_client, catalog):
    first = await search(api_client, sort_by="rating", ascending=False, size=3)
    assert first["total"] == 4
    assert first["total_pages"] == 2
    assert [m["title"] for m in first["items"]] == ["Alien", "Gladiator", "Heat"]

    second = await search(api_client, sort_by="rating", ascending=False, size=3, page=1)
    assert [m["title"] for m in second["items"]] == ["Collateral"]

    by_duration = await search(api_client, sort_by="duration_minutes")
    assert by_duration["items"][0]["title"] == "Alien"


async def test_search_rejects_unknown_sort_key(api_client, catalog):
    resp = await api_client.post("/api/movies/search", json={"sort_by": "plot"})
    assert resp.status_code == 422


async def test_catalog_edits_require_editor_role(api_client, notifier, catalog):
    movie = {"title": "Thief", "director": "Michael Mann", "rating": 7.4, "genres": ["Crime"]}

    anonymous = await api_client.post("/api/movies", json=movie)
    assert anonymous.status_code == 401

    user = await verified_user_headers(api_client, notifier, "viewer", "1")
    forbidden = await api_client.post("/api/movies", json=movie, headers=user)
    assert forbidden.status_code == 403


async def test_moderator_edits_but_cannot_delete(api_client, notifier, catalog):
    moderator = await verified_user_headers(api_client, notifier, "mod", "2", role=RoleName.MODERATOR)

    created = await api_client.post(
        "/api/movies",
        json={"title": "Thief", "director": "Michael Mann", "rating": 7.4, "genres": ["Crime"]},
        headers=moderator,
    )
    assert created.status_code == 201
    movie_id = created.json()["id"]

    updated = await api_client.put(
        f"/api/movies/{movie_id}",
        json={"title": "Thief", "director": "Michael Mann", "rating": 7.5, "genres": ["Crime", "Drama"]},
        headers=moderator,
    )
    assert updated.status_code == 200
    assert updated.json()["rating"] == 7.5
    assert updated.json()["genres"] == ["Crime", "Drama"]

    denied = await api_client.delete(f"/api/movies/{movie_id}", headers=moderator)
    assert denied.status_code == 403


async def test_admin_deletes(api_client, notifier, catalog):
    admin = await verified_user_headers(api_client, notifier, "root", "3", role=RoleName.ADMIN)

    resp = await api_client.delete(f"/api/movies/{catalog['heat']}", headers=admin)
    assert resp.status_code == 204
    assert (await api_client.get(f"/api/movies/{catalog['heat']}")).status_code == 404

    missing = await api_client.delete("/api/movies/999", headers=admin)
    assert missing.status_code == 404


async def test_movie_validation(api_client, notifier):
    admin = await verified_user_headers(api_client, notifier, "root", "3", role=RoleName.ADMIN)
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    invalid = [
        {"title": " ", "director": "X", "rating": 5},
        {"title": "X", "director": "X", "rating": 0},
        {"title": "X", "director": "X", "rating": 5, "duration_minutes": 0},
        {"title": "X", "director": "X", "rating": 5, "release_date": tomorrow},
        {"title": "X", "director": "X", "rating": 5, "plot": "p" * 1001},
    ]
    for body in invalid:
        resp = await api_client.post("/api/movies", json=body, headers=admin)
        assert resp.status_code == 422, body

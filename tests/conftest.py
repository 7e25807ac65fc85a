import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-the-suite")
os.environ["TESTING"] = "true"
os.environ["EMAIL_ENABLED"] = "false"
os.environ["SEED_SAMPLE_MOVIES"] = "false"

from datetime import date
from typing import List, Optional

import httpx
import pytest

from cinema.api.dependencies import get_notifier
from cinema.db.database import SessionLocal, engine
from cinema.db.models import Base
from cinema.domain.enums import RoleName, VerificationChannel
from cinema.infrastructure.orm import RoleModel, MovieModel, MovieGenreModel
from cinema.main import create_app
from make_admin import grant_role


PASSWORD = "s3cret-pass"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        db.add_all([RoleModel(name=role) for role in RoleName])
        db.commit()
    finally:
        db.close()

    yield

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


class RecordingNotifier:
    """Collects codes instead of delivering them"""

    def __init__(self):
        self.sent = []

    def notify(self, channel, destination, code, expires_in_minutes):
        self.sent.append({
            "channel": channel,
            "destination": destination,
            "code": code,
            "expires_in_minutes": expires_in_minutes,
        })

    def last_code(self, destination: str, channel: VerificationChannel) -> Optional[str]:
        for entry in reversed(self.sent):
            if entry["destination"] == destination and entry["channel"] == channel:
                return entry["code"]
        return None

    async def drain(self):
        return None


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
async def api_client(notifier):
    app = create_app()
    app.dependency_overrides[get_notifier] = lambda: notifier
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://cinema.test") as client:
        yield client


def account(username: str, suffix: str = "1") -> dict:
    return {
        "username": username,
        "password": PASSWORD,
        "email": f"{username}@example.com",
        "mobile_number": f"+1555000000{suffix}",
        "full_name": username.title(),
    }


async def register(client: httpx.AsyncClient, username: str, suffix: str = "1") -> dict:
    payload = account(username, suffix)
    resp = await client.post("/api/auth/register", json=payload)
    assert resp.status_code == 201, resp.text
    return payload


async def verify_channels(client, notifier, payload: dict, channels=("email", "mobile")) -> None:
    for channel in channels:
        if channel == "email":
            code = notifier.last_code(payload["email"], VerificationChannel.EMAIL)
        else:
            code = notifier.last_code(payload["mobile_number"], VerificationChannel.MOBILE)
        resp = await client.post(
            f"/api/auth/verify/{channel}",
            json={"username": payload["username"], "code": code},
        )
        assert resp.status_code == 200, resp.text


async def login(client, username: str, password: str = PASSWORD) -> httpx.Response:
    return await client.post("/api/auth/login", json={"username": username, "password": password})


async def verified_user_headers(client, notifier, username: str, suffix: str = "1",
                                role: Optional[RoleName] = None) -> dict:
    payload = await register(client, username, suffix)
    await verify_channels(client, notifier, payload)
    if role is not None:
        db = SessionLocal()
        try:
            assert grant_role(db, username, role)
        finally:
            db.close()
    resp = await login(client, username)
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def add_movie(db, title: str, director: str = "Someone", rating: float = 7.0,
              genres: List[str] = (), release_date: Optional[date] = None,
              duration_minutes: Optional[int] = 100, featured: bool = False) -> int:
    movie = MovieModel(
        title=title,
        director=director,
        rating=rating,
        release_date=release_date,
        duration_minutes=duration_minutes,
        featured=featured,
    )
    movie.genres = [MovieGenreModel(genre=g) for g in genres]
    db.add(movie)
    db.commit()
    return movie.id

import os

# configuration is read at import time, so it has to be in place before the app is imported
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SUPABASE_PROJECT_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("DB_AUTO_CREATE", "false")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.application import application
from app.db.database import Base
from app.db.dependency import get_db
from app.model import registry  # noqa: F401  registers every table
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.security import hash_password
from app.utility.storage import MediaKind, UploadResult, get_media_host

PASSWORD = "correct-horse-battery"


class FakeMediaHost:
    """In-memory stand-in for the Supabase backed MediaHost."""

    def __init__(self):
        self.fail_uploads = False
        self.fail_deletes = False
        self.uploads = []
        self.deleted = []
        self.deleted_folders = []

    async def upload(self, file, folder, kind):
        if self.fail_uploads:
            return None

        path = f"{folder}/{len(self.uploads)}-{file.filename}"
        self.uploads.append(path)
        return UploadResult(
            url=f"https://media.test/{kind.value}/{path}",
            path=path,
            duration=12.5 if kind is MediaKind.VIDEO else None,
        )

    async def delete_by_url(self, url, kind):
        if self.fail_deletes:
            return False
        self.deleted.append(url)
        return True

    async def delete_folder(self, folder):
        self.deleted_folders.append(folder)
        return True


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def media():
    return FakeMediaHost()


@pytest.fixture
async def client(session_factory, media):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_media_host] = lambda: media

    async with AsyncClient(transport=ASGITransport(app=application), base_url="http://test") as client:
        yield client

    application.dependency_overrides.clear()


async def make_user(db, username, **fields) -> UserModel:
    user = UserModel(
        username=username,
        email=fields.pop("email", f"{username}@example.com"),
        full_name=fields.pop("full_name", username.title()),
        password=hash_password(fields.pop("password", PASSWORD)),
        avatar=fields.pop("avatar", f"https://media.test/image/{username}.png"),
        **fields,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def make_video(db, owner, title="A video", **fields) -> VideoModel:
    video = VideoModel(
        owner_id=owner.id,
        title=title,
        description=fields.pop("description", f"{title} description"),
        video_file=fields.pop("video_file", f"https://media.test/video/{title}.mp4"),
        thumbnail=fields.pop("thumbnail", f"https://media.test/image/{title}.png"),
        asset_folder=fields.pop("asset_folder", f"videohub/{owner.id}/{title}"),
        **fields,
    )
    db.add(video)
    await db.commit()
    await db.refresh(video)
    return video


async def login(client, username, password=PASSWORD) -> dict:
    """Log in and return bearer headers; cookies are dropped so several users can share one client."""
    response = await client.post("/api/v2/users/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text

    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['data']['sessionToken']}"}

from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlmodel import SQLModel

from src.adapter.database import create_engine, create_session_factory
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.email_sender import IEmailSender
from src.depends import get_email_sender, get_unit_of_work


class RecordingEmailSender(IEmailSender):
    """Collects outgoing emails instead of delivering them"""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent: List[dict] = []

    async def send_email(
        self, to: str, subject: str, html: str, text: Optional[str] = None
    ) -> bool:
        self.sent.append({"to": to, "subject": subject, "html": html, "text": text})
        return self.succeed


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = create_session_factory(engine)
    async with Session() as session:
        yield session


@pytest.fixture
def email_outbox():
    return RecordingEmailSender()


@pytest_asyncio.fixture
async def client(db_session, email_outbox):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: email_outbox

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

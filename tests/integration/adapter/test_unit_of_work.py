import asyncio

import pytest
from sqlmodel import select

from portal_access.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from portal_access.app.use_cases.sessions import SignInUseCase, SignUpCommand, SignUpUseCase
from portal_access.domain.entities import CustomerUser
from portal_access.domain.errors import StoreCommitUncertainError


def commit_then_time_out(session):
    """Make the session's next commit land and then report a timeout"""
    real_commit = session.commit

    async def _commit():
        await real_commit()
        raise asyncio.TimeoutError()

    session.commit = _commit


@pytest.mark.asyncio
async def test_commit_timeout_raises_commit_uncertain(session_factory):
    async with session_factory() as session:
        commit_then_time_out(session)
        uow = SqlAlchemyUnitOfWork(session)

        with pytest.raises(StoreCommitUncertainError):
            async with uow:
                await uow.commit()


@pytest.mark.asyncio
async def test_sign_up_is_not_replayed_after_commit_timeout(session_factory):
    async with session_factory() as session:
        commit_then_time_out(session)
        result = await SignUpUseCase(SqlAlchemyUnitOfWork(session)).execute(
            SignUpCommand(email="amb@example.com", password="hunter22")
        )

    assert result.error.code == "STORE_UNAVAILABLE"

    async with session_factory() as session:
        customers = (await session.exec(select(CustomerUser))).all()
        assert [c.email for c in customers] == ["amb@example.com"]

    async with session_factory() as session:
        signed_in = await SignInUseCase(SqlAlchemyUnitOfWork(session)).execute(
            "amb@example.com", "hunter22"
        )

    assert signed_in.is_ok()

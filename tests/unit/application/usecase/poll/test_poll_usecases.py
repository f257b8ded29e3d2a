"""Unit tests for the poll use cases."""

import pytest

from portal.application.usecase.poll import (
    CreatePollUseCase,
    GetPollUseCase,
    ListPollsUseCase,
    VoteUseCase,
)
from portal.application.usecase.poll.create_poll import CreatePollRequest
from portal.application.usecase.poll.get_poll import GetPollRequest
from portal.application.usecase.poll.list_polls import ListPollsRequest
from portal.application.usecase.poll.vote import VoteRequest
from portal.domain.error import EligibilityError
from portal.domain.value import PollStatus, Role
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


async def create(env, **kwargs):
    use_case = await env.get(CreatePollUseCase)
    admin = await seed_account(env, role=Role.ADMIN)
    kwargs.setdefault("question", "Which elective?")
    kwargs.setdefault("options", ["Networks", "Graphics"])
    response = await use_case.execute(
        CreatePollRequest(actor=principal_for(admin), **kwargs)
    )
    return response.poll


class TestVoteUseCase:
    @pytest.mark.asyncio
    async def test_vote_reports_tallies_and_state(self, unit_env):
        # Arrange
        vote = await unit_env.get(VoteUseCase)
        poll = await create(unit_env)
        voter = await seed_account(unit_env)

        # Act
        response = await vote.execute(
            VoteRequest(
                actor=principal_for(voter),
                poll_id=poll.id,
                option_id=poll.options[0].id,
            )
        )

        # Assert
        assert response.poll.total_votes == 1
        assert [o.percentage for o in response.poll.options] == [100.0, 0.0]
        assert response.poll.has_voted is True
        assert response.poll.user_voted_options == [poll.options[0].id]
        assert response.poll.can_vote is False

    @pytest.mark.asyncio
    async def test_ineligible_level(self, unit_env):
        vote = await unit_env.get(VoteUseCase)
        poll = await create(unit_env, target_levels=["400L"])
        voter = await seed_account(unit_env, level="100L")

        with pytest.raises(EligibilityError):
            await vote.execute(
                VoteRequest(
                    actor=principal_for(voter),
                    poll_id=poll.id,
                    option_id=poll.options[0].id,
                )
            )


class TestReadPolls:
    @pytest.mark.asyncio
    async def test_viewer_state(self, unit_env):
        get_poll = await unit_env.get(GetPollUseCase)
        poll = await create(unit_env, target_levels=["200L"])
        eligible = await seed_account(unit_env, level="200")
        ineligible = await seed_account(unit_env, level="300")

        as_eligible = await get_poll.execute(
            GetPollRequest(poll_id=poll.id, viewer=principal_for(eligible))
        )
        as_ineligible = await get_poll.execute(
            GetPollRequest(poll_id=poll.id, viewer=principal_for(ineligible))
        )
        anonymous = await get_poll.execute(GetPollRequest(poll_id=poll.id))

        assert as_eligible.poll.can_vote is True
        assert as_ineligible.poll.can_vote is False
        assert anonymous.poll.can_vote is False
        assert anonymous.poll.has_voted is False

    @pytest.mark.asyncio
    async def test_list_filters_by_status(self, unit_env):
        list_polls = await unit_env.get(ListPollsUseCase)
        await create(unit_env)

        active = await list_polls.execute(ListPollsRequest(status=PollStatus.ACTIVE))
        closed = await list_polls.execute(ListPollsRequest(status=PollStatus.CLOSED))

        assert len(active.polls) == 1
        assert closed.polls == []
